r"""Retry package implementing class-based composition pattern.

This package provides the retry machinery used by the Loterias API
clients: a validated policy, a decider classifying attempt outcomes, a
strategy computing backoff delays, and executors running the retry
loop over an injected transport.

Public API:
    - RetryPolicy: Immutable configuration of the retry behavior
    - Success, HttpFailure, TransportFailure: Outcomes of one attempt (re-exported
      from loterias.outcome)
    - RetryDecider, RetryDecision: Logic for deciding whether to retry
    - RetryStrategy: Strategy for calculating retry delays
    - CallbackManager: Manager for callback invocations
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AttemptOutcome",
    "CallbackManager",
    "HttpFailure",
    "RetryDecider",
    "RetryDecision",
    "RetryExecutor",
    "RetryPolicy",
    "RetryStrategy",
    "Success",
    "TransportFailure",
]

from loterias.outcome import AttemptOutcome, HttpFailure, Success, TransportFailure
from loterias.retry.decider import RetryDecider, RetryDecision
from loterias.retry.executor import RetryExecutor
from loterias.retry.executor_async import AsyncRetryExecutor
from loterias.retry.manager import CallbackManager
from loterias.retry.policy import RetryPolicy
from loterias.retry.strategy import RetryStrategy
