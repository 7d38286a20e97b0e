r"""Retry policy for requests sent to the Loterias API.

A ``RetryPolicy`` is created once per client configuration, validated at
construction and never mutated afterwards, so a single instance can be
shared by all the requests (and threads or tasks) of a client.
"""

from __future__ import annotations

__all__ = ["RetryPolicy"]

from dataclasses import dataclass

from loterias.config import (
    DEFAULT_BASE_DELAY_MS,
    DEFAULT_MAX_DELAY_MS,
    DEFAULT_MAX_RETRIES,
    MAX_RETRIES_LIMIT,
)
from loterias.exceptions import ConfigurationError


@dataclass(frozen=True)
class RetryPolicy:
    r"""Immutable parameters governing whether and how requests are
    retried.

    The delay before retry ``n`` (0-indexed) is
    ``base_delay_ms * 2 ** n`` with +/-10% jitter, capped at
    ``max_delay_ms``. A ``Retry-After`` header sent by the server takes
    precedence over this schedule.

    Args:
        enabled: Whether automatic retries are enabled. A disabled policy
            performs a single attempt, whatever the other fields are.
        max_retries: Maximum number of retries after the first attempt.
            Must be between 0 and 10.
        base_delay_ms: Base delay in milliseconds of the exponential
            backoff. Must be >= 0.
        max_delay_ms: Upper bound in milliseconds of any single delay.
            Must be >= ``base_delay_ms``.

    Raises:
        ConfigurationError: If any parameter is out of range.

    Example:
        ```pycon
        >>> from loterias.retry import RetryPolicy
        >>> policy = RetryPolicy(max_retries=5, base_delay_ms=500)
        >>> policy.max_attempts
        6
        >>> RetryPolicy.disabled().max_attempts
        1
        >>> RetryPolicy(max_retries=15)
        Traceback (most recent call last):
        ...
        loterias.exceptions.ConfigurationError: max_retries must be between 0 and 10, got 15

        ```
    """

    enabled: bool = True
    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay_ms: int = DEFAULT_BASE_DELAY_MS
    max_delay_ms: int = DEFAULT_MAX_DELAY_MS

    def __post_init__(self) -> None:
        if not 0 <= self.max_retries <= MAX_RETRIES_LIMIT:
            msg = f"max_retries must be between 0 and {MAX_RETRIES_LIMIT}, got {self.max_retries}"
            raise ConfigurationError(msg)
        if self.base_delay_ms < 0:
            msg = f"base_delay_ms must be >= 0, got {self.base_delay_ms}"
            raise ConfigurationError(msg)
        if self.max_delay_ms < self.base_delay_ms:
            msg = (
                f"max_delay_ms must be >= base_delay_ms ({self.base_delay_ms}), "
                f"got {self.max_delay_ms}"
            )
            raise ConfigurationError(msg)

    @classmethod
    def disabled(cls) -> RetryPolicy:
        r"""Return a policy that never retries.

        Returns:
            The disabled retry policy.
        """
        return cls(enabled=False)

    @property
    def max_attempts(self) -> int:
        r"""Total number of attempts allowed, including the first one."""
        return self.max_retries + 1 if self.enabled else 1
