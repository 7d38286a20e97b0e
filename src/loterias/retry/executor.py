r"""Synchronous retry executor for API requests.

This module provides the RetryExecutor class that sends a request
through an injected transport, retrying transient failures with
exponential backoff.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, Any

from loterias.exceptions import RequestCancelledError
from loterias.outcome import HttpFailure, TransportFailure
from loterias.retry.decider import RetryDecider, RetryDecision
from loterias.retry.executor_core import finish, retry_reason
from loterias.retry.manager import CallbackManager
from loterias.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    import random
    import threading
    from collections.abc import Callable

    from loterias.callbacks import RetryCallbacks
    from loterias.outcome import AttemptOutcome
    from loterias.request import RequestDescriptor
    from loterias.retry.policy import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes API requests with automatic retry logic.

    The executor calls ``attempt_func`` once per attempt. After each
    attempt, the decider classifies the outcome; a retryable outcome is
    followed by a wait computed by the strategy, then by a new attempt.
    The attempts of one request are strictly sequential. The executor
    keeps no per-request state, so one instance can serve concurrent
    requests from several threads.

    The waits block the calling thread.

    Attributes:
        policy: The retry policy.
        attempt_func: Function performing one attempt, e.g.
            ``ApiTransport.attempt``.
        strategy: Strategy for calculating retry delays.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> from loterias.retry import HttpFailure, RetryExecutor, RetryPolicy, Success
        >>> from loterias.request import RequestDescriptor
        >>> outcomes = iter([HttpFailure(503), Success(200, b'{"data": []}')])
        >>> executor = RetryExecutor(
        ...     RetryPolicy(base_delay_ms=0), attempt_func=lambda request: next(outcomes)
        ... )
        >>> executor.execute(RequestDescriptor.build("GET", "/results"))
        {'data': []}

        ```
    """

    def __init__(
        self,
        policy: RetryPolicy,
        attempt_func: Callable[[RequestDescriptor], AttemptOutcome],
        callbacks: RetryCallbacks | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.policy = policy
        self.attempt_func = attempt_func
        self.strategy: RetryStrategy = RetryStrategy(policy, rng=rng)
        self.decider: RetryDecider = RetryDecider(policy)
        self.callbacks: CallbackManager = CallbackManager(callbacks, policy.max_attempts - 1)

    def execute(
        self,
        request: RequestDescriptor,
        cancel_event: threading.Event | None = None,
    ) -> Any:
        """Execute the request with automatic retry logic.

        Args:
            request: The request to send.
            cancel_event: Optional event; once set, the pending wait is
                aborted and no further attempt is made.

        Returns:
            The decoded JSON payload of the successful response.

        Raises:
            LoteriasApiError: If the request fails with a non-retryable
                status, or the retries are exhausted.
            NetworkError: If no response could be obtained.
            RequestCancelledError: If ``cancel_event`` is set before the
                request completes.
        """
        start_time = time.time()
        attempt = 0
        while True:
            self._check_cancelled(request, cancel_event)
            self.callbacks.on_request(request, attempt)
            outcome = self.attempt_func(request)

            if self.decider.decide(outcome, attempt) is RetryDecision.STOP:
                return finish(
                    outcome,
                    request=request,
                    attempt=attempt,
                    callbacks=self.callbacks,
                    start_time=start_time,
                )

            delay_ms = self.strategy.calculate_delay(attempt, outcome)
            logger.debug(
                f"{request.method} {request.path}: will retry ({retry_reason(outcome)}) "
                f"in {delay_ms}ms, attempt {attempt + 1}/{self.policy.max_attempts}"
            )
            self.callbacks.on_retry(
                request,
                attempt,
                delay_ms,
                outcome.cause if isinstance(outcome, TransportFailure) else None,
                outcome.status_code if isinstance(outcome, HttpFailure) else None,
            )
            self._wait(request, delay_ms, cancel_event)
            attempt += 1

    def _wait(
        self,
        request: RequestDescriptor,
        delay_ms: int,
        cancel_event: threading.Event | None,
    ) -> None:
        if cancel_event is None:
            time.sleep(delay_ms / 1000)
        elif cancel_event.wait(delay_ms / 1000):
            self._check_cancelled(request, cancel_event)

    def _check_cancelled(
        self, request: RequestDescriptor, cancel_event: threading.Event | None
    ) -> None:
        if cancel_event is not None and cancel_event.is_set():
            logger.debug(f"{request.method} {request.path}: cancelled")
            raise RequestCancelledError
