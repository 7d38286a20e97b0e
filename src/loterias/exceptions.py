r"""Exceptions raised by the Loterias API client.

The hierarchy is intentionally small:

- ``ConfigurationError``: invalid client or retry configuration. It is
  raised when the configuration object is built, before any request is
  sent.
- ``LoteriasApiError``: terminal failure of a request, raised once the
  retries are exhausted or a non-retryable response is received.
- ``NetworkError``: a ``LoteriasApiError`` raised when no HTTP response
  was ever obtained (``status_code == 0``).
- ``RequestCancelledError``: a ``LoteriasApiError`` raised when the
  caller cancels a request while it waits before the next attempt.
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "LoteriasApiError",
    "NetworkError",
    "RequestCancelledError",
]

from typing import Any

NETWORK_ERROR_CODE = "NETWORK_ERROR"
CANCELLED_ERROR_CODE = "CANCELLED"


class ConfigurationError(ValueError):
    r"""Raised when the client or retry configuration is invalid.

    Example:
        ```pycon
        >>> from loterias.exceptions import ConfigurationError
        >>> raise ConfigurationError("max_retries must be between 0 and 10, got 15")
        Traceback (most recent call last):
        ...
        loterias.exceptions.ConfigurationError: max_retries must be between 0 and 10, got 15

        ```
    """


class LoteriasApiError(Exception):
    r"""Raised when a request to the Loterias API fails.

    The error carries the fields of the API error envelope
    (``{"error": {"code", "message", "statusCode", "details"}}``) so
    callers can inspect the failure without parsing the response again.

    Args:
        message: Human-readable error message.
        error_code: Machine-readable error code returned by the API
            (e.g. ``"NOT_FOUND"``), or a client-side code such as
            ``"NETWORK_ERROR"``.
        status_code: HTTP status code of the failure, ``0`` when no
            response was received.
        details: Optional mapping with additional error details.

    Example:
        ```pycon
        >>> from loterias.exceptions import LoteriasApiError
        >>> error = LoteriasApiError(
        ...     message="Game not found", error_code="NOT_FOUND", status_code=404
        ... )
        >>> error.status_code
        404
        >>> error
        LoteriasApiError(message='Game not found', error_code='NOT_FOUND', status_code=404, details=None)

        ```
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(message={self.message!r}, "
            f"error_code={self.error_code!r}, status_code={self.status_code}, "
            f"details={self.details!r})"
        )


class NetworkError(LoteriasApiError):
    r"""Raised when no HTTP response could be obtained from the API.

    Args:
        original_error: Description of the underlying transport failure.
        message: Human-readable error message.

    Example:
        ```pycon
        >>> from loterias.exceptions import NetworkError
        >>> error = NetworkError("Connection refused")
        >>> error.error_code, error.status_code
        ('NETWORK_ERROR', 0)
        >>> error.details
        {'original_error': 'Connection refused'}

        ```
    """

    def __init__(self, original_error: str, message: str = "Network error") -> None:
        super().__init__(
            message=message,
            error_code=NETWORK_ERROR_CODE,
            status_code=0,
            details={"original_error": original_error},
        )


class RequestCancelledError(LoteriasApiError):
    r"""Raised when a request is cancelled while waiting for a retry."""

    def __init__(self, message: str = "Request cancelled") -> None:
        super().__init__(message=message, error_code=CANCELLED_ERROR_CODE, status_code=0)
