r"""Response decoding utilities.

This module turns the final outcome of a request into what the caller
receives: the decoded JSON payload of a successful response, or a
``LoteriasApiError`` describing the failure.
"""

from __future__ import annotations

__all__ = ["build_error", "decode_payload"]

import json
import logging
from typing import TYPE_CHECKING, Any

from loterias.exceptions import LoteriasApiError, NetworkError
from loterias.outcome import HttpFailure, TransportFailure

if TYPE_CHECKING:
    from loterias.outcome import AttemptOutcome, Success

logger: logging.Logger = logging.getLogger(__name__)

UNKNOWN_ERROR_CODE = "UNKNOWN_ERROR"
UNKNOWN_ERROR_MESSAGE = "Unknown error"
INVALID_RESPONSE_CODE = "INVALID_RESPONSE"


def _loads(body: bytes) -> Any:
    return json.loads(body.decode("utf-8"))


def decode_payload(outcome: Success) -> Any:
    r"""Decode the JSON body of a successful response.

    Args:
        outcome: The successful outcome.

    Returns:
        The decoded JSON document. An empty body decodes to ``{}``.

    Raises:
        LoteriasApiError: If the body is not valid JSON.

    Example:
        ```pycon
        >>> from loterias.outcome import Success
        >>> from loterias.utils.response import decode_payload
        >>> decode_payload(Success(200, b'{"data": {"isWinner": false}}'))
        {'data': {'isWinner': False}}

        ```
    """
    if not outcome.body.strip():
        return {}
    try:
        return _loads(outcome.body)
    except (UnicodeDecodeError, ValueError) as exc:
        logger.debug(f"Failed to decode response body with status {outcome.status_code}: {exc}")
        raise LoteriasApiError(
            message="Invalid JSON in API response",
            error_code=INVALID_RESPONSE_CODE,
            status_code=outcome.status_code,
            details={"original_error": str(exc)},
        ) from exc


def _error_envelope(body: bytes) -> dict[str, Any]:
    try:
        data = _loads(body)
    except (UnicodeDecodeError, ValueError):
        return {}
    if not isinstance(data, dict):
        return {}
    error = data.get("error")
    return error if isinstance(error, dict) else {}


def build_error(outcome: AttemptOutcome) -> LoteriasApiError:
    r"""Build the error communicated to the caller for a failed request.

    For an HTTP failure, the fields are read from the API error envelope
    ``{"error": {"code", "message", "statusCode", "details"}}``. Missing
    fields fall back to ``"UNKNOWN_ERROR"``, ``"Unknown error"``, the
    response status code and ``None``. A transport failure becomes a
    ``NetworkError``.

    Args:
        outcome: The final failed outcome.

    Returns:
        The error to raise.

    Raises:
        TypeError: If the outcome is not a failure.

    Example:
        ```pycon
        >>> from loterias.outcome import HttpFailure
        >>> from loterias.utils.response import build_error
        >>> body = b'{"error": {"code": "NOT_FOUND", "message": "Draw not found"}}'
        >>> build_error(HttpFailure(404, body=body))
        LoteriasApiError(message='Draw not found', error_code='NOT_FOUND', status_code=404, details=None)

        ```
    """
    if isinstance(outcome, TransportFailure):
        return NetworkError(str(outcome.cause))
    if not isinstance(outcome, HttpFailure):
        msg = f"Cannot build an error from a successful outcome: {outcome!r}"
        raise TypeError(msg)

    error = _error_envelope(outcome.body)
    status_code = error.get("statusCode")
    details = error.get("details")
    return LoteriasApiError(
        message=str(error.get("message") or UNKNOWN_ERROR_MESSAGE),
        error_code=str(error.get("code") or UNKNOWN_ERROR_CODE),
        status_code=status_code if isinstance(status_code, int) else outcome.status_code,
        details=details if isinstance(details, dict) else None,
    )
