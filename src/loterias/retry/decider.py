r"""Retry decision logic for attempt outcomes.

This module provides the RetryDecider class that decides whether a
request should be attempted again, given the outcome of the last
attempt and the number of attempts already made.
"""

from __future__ import annotations

__all__ = ["RetryDecider", "RetryDecision"]

import enum
import logging
from typing import TYPE_CHECKING

from loterias.config import RETRY_STATUS_CODES
from loterias.outcome import HttpFailure, Success, TransportFailure

if TYPE_CHECKING:
    from loterias.outcome import AttemptOutcome
    from loterias.retry.policy import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecision(enum.Enum):
    r"""Decision taken after an attempt."""

    RETRY = "retry"
    STOP = "stop"


class RetryDecider:
    r"""Decides whether a request should be retried.

    The rules are evaluated in order:

    1. The retry budget of the policy is exhausted: stop.
    2. The attempt succeeded: stop.
    3. The response status is retryable (429, 500, 502, 503, 504): retry.
    4. The server could not be reached: retry.
    5. Anything else: stop.

    Args:
        policy: The retry policy.
        status_forcelist: Tuple of retryable HTTP status codes.

    Example:
        ```pycon
        >>> from loterias.retry import HttpFailure, RetryDecider, RetryPolicy
        >>> decider = RetryDecider(RetryPolicy(max_retries=3))
        >>> decider.decide(HttpFailure(status_code=503), attempt=0)
        <RetryDecision.RETRY: 'retry'>
        >>> decider.decide(HttpFailure(status_code=503), attempt=3)
        <RetryDecision.STOP: 'stop'>
        >>> decider.decide(HttpFailure(status_code=400), attempt=0)
        <RetryDecision.STOP: 'stop'>

        ```
    """

    def __init__(
        self,
        policy: RetryPolicy,
        status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
    ) -> None:
        self.policy = policy
        self.status_forcelist = status_forcelist

    def decide(self, outcome: AttemptOutcome, attempt: int) -> RetryDecision:
        r"""Decide whether to retry after an attempt.

        Args:
            outcome: The outcome of the attempt.
            attempt: The attempt number (0-indexed, 0 is the first try).

        Returns:
            ``RetryDecision.RETRY`` or ``RetryDecision.STOP``.
        """
        if not self.policy.enabled or attempt >= self.policy.max_retries:
            return RetryDecision.STOP
        if isinstance(outcome, Success):
            return RetryDecision.STOP
        if isinstance(outcome, HttpFailure):
            if outcome.status_code in self.status_forcelist:
                return RetryDecision.RETRY
            logger.debug(f"Status {outcome.status_code} is not retryable")
            return RetryDecision.STOP
        if isinstance(outcome, TransportFailure) and outcome.connection_failure:
            return RetryDecision.RETRY
        logger.debug(f"Transport failure is not retryable: {outcome!r}")
        return RetryDecision.STOP

    def should_retry(self, outcome: AttemptOutcome, attempt: int) -> bool:
        r"""Return ``True`` if the request should be attempted again.

        Args:
            outcome: The outcome of the attempt.
            attempt: The attempt number (0-indexed).

        Returns:
            Whether to retry.
        """
        return self.decide(outcome, attempt) is RetryDecision.RETRY
