r"""Retry strategy for calculating backoff delays.

This module provides the RetryStrategy class that computes how long to
wait before the next attempt.
"""

from __future__ import annotations

__all__ = ["JITTER_RATIO", "RetryStrategy"]

import logging
import random
from typing import TYPE_CHECKING

from loterias.outcome import HttpFailure
from loterias.utils.retry_after import parse_retry_after, utcnow

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from loterias.outcome import AttemptOutcome
    from loterias.retry.policy import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)

# Maximum jitter as a fraction of the exponential delay
JITTER_RATIO = 0.1


class RetryStrategy:
    r"""Strategy for calculating retry delays with backoff and jitter.

    The delay is calculated as follows:

    1. If the outcome carries a ``Retry-After`` header that can be
       parsed, use it (seconds converted to milliseconds), capped at
       ``policy.max_delay_ms``. The server hint takes precedence over
       the backoff schedule.
    2. Otherwise compute ``base_delay_ms * 2 ** attempt``, add a
       symmetric jitter of up to +/-10%, and clamp the result to
       ``[0, policy.max_delay_ms]``.

    Args:
        policy: The retry policy providing the delay bounds.
        rng: Random source for the jitter. Defaults to a new
            ``random.Random`` instance.
        now: Function returning the current time, used for HTTP-date
            ``Retry-After`` values.

    Example:
        ```pycon
        >>> import random
        >>> from loterias.retry import RetryPolicy, RetryStrategy
        >>> from loterias.outcome import HttpFailure
        >>> strategy = RetryStrategy(RetryPolicy(base_delay_ms=1000, max_delay_ms=3000))
        >>> strategy.calculate_delay(0, HttpFailure(429, headers={"Retry-After": "5"}))
        3000
        >>> 900 <= strategy.calculate_delay(0) <= 1100
        True
        >>> strategy.calculate_delay(5)
        3000

        ```
    """

    def __init__(
        self,
        policy: RetryPolicy,
        rng: random.Random | None = None,
        now: Callable[[], datetime] = utcnow,
    ) -> None:
        self.policy = policy
        self.rng = rng if rng is not None else random.Random()  # noqa: S311
        self.now = now

    def calculate_delay(self, attempt: int, outcome: AttemptOutcome | None = None) -> int:
        r"""Calculate the delay before the next attempt.

        Args:
            attempt: The attempt that just failed (0-indexed).
            outcome: The outcome of that attempt, used to read the
                ``Retry-After`` header.

        Returns:
            The delay in milliseconds, between 0 and
            ``policy.max_delay_ms``.
        """
        hinted = self._delay_from_retry_after(outcome)
        if hinted is not None:
            logger.debug(f"Using Retry-After header value: {hinted}ms")
            return hinted

        exponential = self.policy.base_delay_ms * (2**attempt)
        jitter = int(exponential * JITTER_RATIO * self.rng.uniform(-1.0, 1.0))
        delay = self._clamp(exponential + jitter)
        logger.debug(
            f"Waiting {delay}ms before retry (base={exponential}ms, jitter={jitter}ms)"
        )
        return delay

    def _delay_from_retry_after(self, outcome: AttemptOutcome | None) -> int | None:
        if not isinstance(outcome, HttpFailure):
            return None
        seconds = parse_retry_after(outcome.retry_after, now=self.now)
        if seconds is None:
            return None
        return self._clamp(int(min(seconds, self.policy.max_delay_ms / 1000) * 1000))

    def _clamp(self, delay_ms: int) -> int:
        return min(max(delay_ms, 0), self.policy.max_delay_ms)
