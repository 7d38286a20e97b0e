r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
asynchronous retry executors to turn the final outcome of a request
into a payload or an error.
"""

from __future__ import annotations

__all__ = ["finish", "retry_reason"]

import logging
from typing import TYPE_CHECKING, Any

from loterias.exceptions import LoteriasApiError
from loterias.outcome import HttpFailure, Success
from loterias.utils.response import build_error, decode_payload

if TYPE_CHECKING:
    from loterias.outcome import AttemptOutcome
    from loterias.request import RequestDescriptor
    from loterias.retry.manager import CallbackManager

logger: logging.Logger = logging.getLogger(__name__)


def retry_reason(outcome: AttemptOutcome) -> str:
    r"""Return a short description of why an outcome is retried.

    Args:
        outcome: The failed outcome.

    Returns:
        The description, used in log messages.
    """
    if isinstance(outcome, HttpFailure):
        return f"status {outcome.status_code}"
    return type(getattr(outcome, "cause", outcome)).__name__


def finish(
    outcome: AttemptOutcome,
    *,
    request: RequestDescriptor,
    attempt: int,
    callbacks: CallbackManager,
    start_time: float,
) -> Any:
    r"""Translate the final outcome of a request.

    Args:
        outcome: The outcome of the last attempt.
        request: The request.
        attempt: The last attempt number (0-indexed).
        callbacks: Callback manager for invoking on_success/on_failure.
        start_time: When the request started.

    Returns:
        The decoded JSON payload of a successful response.

    Raises:
        LoteriasApiError: If the request failed, or if a successful
            response does not contain valid JSON.
    """
    if isinstance(outcome, Success):
        try:
            payload = decode_payload(outcome)
        except LoteriasApiError as error:
            callbacks.on_failure(request, attempt, error, start_time)
            raise
        callbacks.on_success(request, attempt, outcome.status_code, start_time)
        return payload

    error = build_error(outcome)
    logger.debug(
        f"{request.method} {request.path} failed after {attempt + 1} attempt(s): "
        f"{error.error_code} ({error.status_code})"
    )
    callbacks.on_failure(request, attempt, error, start_time)
    cause = getattr(outcome, "cause", None)
    if cause is not None:
        raise error from cause
    raise error
