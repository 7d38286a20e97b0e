r"""Callback manager for orchestrating retry lifecycle events.

This module provides the CallbackManager class that handles invocation
of user-defined callbacks at various points in the retry lifecycle.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

import time
from typing import TYPE_CHECKING

from loterias.callbacks import (
    FailureInfo,
    RequestInfo,
    ResponseInfo,
    RetryCallbacks,
    RetryInfo,
)

if TYPE_CHECKING:
    from loterias.exceptions import LoteriasApiError
    from loterias.request import RequestDescriptor


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Attempt numbers are received 0-indexed and reported 1-indexed to the
    callbacks.

    Attributes:
        callbacks: Configuration containing callback functions for lifecycle events.
        max_retries: Maximum number of retries, reported to the callbacks.
    """

    def __init__(self, callbacks: RetryCallbacks | None, max_retries: int) -> None:
        self.callbacks = callbacks if callbacks is not None else RetryCallbacks()
        self.max_retries = max_retries

    def on_request(self, request: RequestDescriptor, attempt: int) -> None:
        """Invoke on_request callback.

        Args:
            request: The request about to be sent.
            attempt: Current attempt number (0-indexed).
        """
        if self.callbacks.on_request:
            self.callbacks.on_request(
                RequestInfo(
                    method=request.method,
                    path=request.path,
                    attempt=attempt + 1,
                    max_retries=self.max_retries,
                )
            )

    def on_retry(
        self,
        request: RequestDescriptor,
        attempt: int,
        wait_time_ms: int,
        error: Exception | None,
        status_code: int | None,
    ) -> None:
        """Invoke on_retry callback.

        Args:
            request: The request being retried.
            attempt: The attempt that just failed (0-indexed).
            wait_time_ms: Delay before the retry.
            error: Exception that triggered retry (if any).
            status_code: Status code that triggered retry (if any).
        """
        if self.callbacks.on_retry:
            self.callbacks.on_retry(
                RetryInfo(
                    method=request.method,
                    path=request.path,
                    attempt=attempt + 2,  # Next attempt number
                    max_retries=self.max_retries,
                    wait_time_ms=wait_time_ms,
                    error=error,
                    status_code=status_code,
                )
            )

    def on_success(
        self,
        request: RequestDescriptor,
        attempt: int,
        status_code: int,
        start_time: float,
    ) -> None:
        """Invoke on_success callback.

        Args:
            request: The request that succeeded.
            attempt: Attempt number that succeeded (0-indexed).
            status_code: Status code of the response.
            start_time: Timestamp when the request started.
        """
        if self.callbacks.on_success:
            self.callbacks.on_success(
                ResponseInfo(
                    method=request.method,
                    path=request.path,
                    attempt=attempt + 1,
                    max_retries=self.max_retries,
                    status_code=status_code,
                    total_time=time.time() - start_time,
                )
            )

    def on_failure(
        self,
        request: RequestDescriptor,
        attempt: int,
        error: LoteriasApiError,
        start_time: float,
    ) -> None:
        """Invoke on_failure callback.

        Args:
            request: The request that failed.
            attempt: Final attempt number (0-indexed).
            error: The error raised to the caller.
            start_time: Timestamp when the request started.
        """
        if self.callbacks.on_failure:
            self.callbacks.on_failure(
                FailureInfo(
                    method=request.method,
                    path=request.path,
                    attempt=attempt + 1,
                    max_retries=self.max_retries,
                    error=error,
                    total_time=time.time() - start_time,
                )
            )
