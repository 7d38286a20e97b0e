r"""Callback types and data structures for observability.

This module lets users hook into the retry lifecycle of the Loterias API
client for logging, metrics or alerting. Four hooks are available:

- on_request: Called before each attempt
- on_retry: Called before each retry (before the backoff delay)
- on_success: Called when a request succeeds
- on_failure: Called when a request fails for good

Example:
    ```pycon
    >>> from loterias import LoteriasApi
    >>> from loterias.callbacks import RetryCallbacks, RetryInfo
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"Retry {info.attempt}/{info.max_retries + 1} in {info.wait_time_ms}ms")
    ...
    >>> api = LoteriasApi("lat_xxx", callbacks=RetryCallbacks(on_retry=log_retry))  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = ["FailureInfo", "RequestInfo", "ResponseInfo", "RetryCallbacks", "RetryInfo"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from loterias.exceptions import LoteriasApiError


@dataclass
class RequestInfo:
    """Information passed to on_request callback.

    Attributes:
        method: The HTTP method (e.g., "GET").
        path: The API path being requested.
        attempt: The current attempt number (1-indexed). First attempt is 1.
        max_retries: Maximum number of retries configured.
    """

    method: str
    path: str
    attempt: int
    max_retries: int


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        method: The HTTP method (e.g., "GET").
        path: The API path being requested.
        attempt: The number of the upcoming attempt (1-indexed). First
            retry is attempt 2.
        max_retries: Maximum number of retries configured.
        wait_time_ms: The delay in milliseconds before this retry.
        error: The transport exception that triggered the retry (if any).
        status_code: The HTTP status code that triggered the retry (if any).
    """

    method: str
    path: str
    attempt: int
    max_retries: int
    wait_time_ms: int
    error: Exception | None
    status_code: int | None


@dataclass
class ResponseInfo:
    """Information passed to on_success callback.

    Attributes:
        method: The HTTP method (e.g., "GET").
        path: The API path that was requested.
        attempt: The attempt number that succeeded (1-indexed).
        max_retries: Maximum number of retries configured.
        status_code: The HTTP status code of the response.
        total_time: Total time spent on all attempts including backoff (seconds).
    """

    method: str
    path: str
    attempt: int
    max_retries: int
    status_code: int
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        method: The HTTP method (e.g., "GET").
        path: The API path that was requested.
        attempt: The final attempt number (1-indexed).
        max_retries: Maximum number of retries configured.
        error: The error raised to the caller.
        total_time: Total time spent on all attempts including backoff (seconds).
    """

    method: str
    path: str
    attempt: int
    max_retries: int
    error: LoteriasApiError
    total_time: float


@dataclass
class RetryCallbacks:
    """Configuration for lifecycle callbacks.

    Attributes:
        on_request: Optional callback invoked before each attempt.
        on_retry: Optional callback invoked before each retry.
        on_success: Optional callback invoked when a request succeeds.
        on_failure: Optional callback invoked when a request fails.
    """

    on_request: Callable[[RequestInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[ResponseInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None
