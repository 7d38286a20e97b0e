r"""Asynchronous retry executor for API requests.

This module provides the AsyncRetryExecutor class, the asyncio
counterpart of ``RetryExecutor``.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

from loterias.outcome import HttpFailure, TransportFailure
from loterias.retry.decider import RetryDecider, RetryDecision
from loterias.retry.executor_core import finish, retry_reason
from loterias.retry.manager import CallbackManager
from loterias.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    import random
    from collections.abc import Awaitable, Callable

    from loterias.callbacks import RetryCallbacks
    from loterias.outcome import AttemptOutcome
    from loterias.request import RequestDescriptor
    from loterias.retry.policy import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes async API requests with automatic retry logic.

    The retry loop is the same as ``RetryExecutor``'s, but the waits use
    ``asyncio.sleep()`` so other tasks keep running while a request is
    backing off. Cancelling the task running ``execute`` aborts the
    pending wait or attempt; ``asyncio.CancelledError`` propagates
    unchanged and is never reported as a network error.

    Attributes:
        policy: The retry policy.
        attempt_func: Coroutine function performing one attempt, e.g.
            ``AsyncApiTransport.attempt``.
        strategy: Strategy for calculating retry delays.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> import asyncio
        >>> from loterias.retry import AsyncRetryExecutor, RetryPolicy, Success
        >>> from loterias.request import RequestDescriptor
        >>> async def attempt(request):
        ...     return Success(200, b'{"data": []}')
        ...
        >>> executor = AsyncRetryExecutor(RetryPolicy(), attempt_func=attempt)
        >>> asyncio.run(executor.execute(RequestDescriptor.build("GET", "/draws/upcoming")))
        {'data': []}

        ```
    """

    def __init__(
        self,
        policy: RetryPolicy,
        attempt_func: Callable[[RequestDescriptor], Awaitable[AttemptOutcome]],
        callbacks: RetryCallbacks | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.policy = policy
        self.attempt_func = attempt_func
        self.strategy: RetryStrategy = RetryStrategy(policy, rng=rng)
        self.decider: RetryDecider = RetryDecider(policy)
        self.callbacks: CallbackManager = CallbackManager(callbacks, policy.max_attempts - 1)

    async def execute(self, request: RequestDescriptor) -> Any:
        """Execute the request with automatic retry logic.

        Args:
            request: The request to send.

        Returns:
            The decoded JSON payload of the successful response.

        Raises:
            LoteriasApiError: If the request fails with a non-retryable
                status, or the retries are exhausted.
            NetworkError: If no response could be obtained.
        """
        start_time = time.time()
        attempt = 0
        while True:
            self.callbacks.on_request(request, attempt)
            outcome = await self.attempt_func(request)

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
            await asyncio.sleep(delay_ms / 1000)
            attempt += 1
