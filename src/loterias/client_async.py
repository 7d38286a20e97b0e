r"""Asynchronous client for the Loterias API.

This module provides ``AsyncLoteriasApi``, the asyncio counterpart of
``LoteriasApi``. Resource methods return awaitables.
"""

from __future__ import annotations

__all__ = ["AsyncLoteriasApi"]

from typing import TYPE_CHECKING, Any

import httpx

from loterias.client import resolve_config
from loterias.request import RequestDescriptor
from loterias.resources import Draws, Results
from loterias.retry.executor_async import AsyncRetryExecutor
from loterias.transport import AsyncApiTransport

if TYPE_CHECKING:
    import random
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

    from loterias.callbacks import RetryCallbacks
    from loterias.config import ClientConfig
    from loterias.retry.policy import RetryPolicy


class AsyncLoteriasApi:
    r"""Asynchronous client for the Loterias API.

    Waits between retries use ``asyncio.sleep()``, so concurrent requests
    made with the same client do not block each other.

    Args:
        api_key: The API key. Required unless ``config`` is given.
        base_url: Base URL of the API.
        timeout: Timeout in seconds of one attempt.
        retry: The retry policy.
        callbacks: Optional lifecycle callbacks.
        config: Optional configuration. The other arguments override it.
        client: Optional ``httpx.AsyncClient`` used to send the requests.
        rng: Optional random source for the retry jitter.

    Raises:
        ConfigurationError: If the configuration is invalid.

    Example:
        ```pycon
        >>> import asyncio
        >>> from loterias import AsyncLoteriasApi, GameType
        >>> async def main():
        ...     async with AsyncLoteriasApi("lat_xxx") as api:
        ...         return await api.draws.list_upcoming_by_game(GameType.PRIMITIVA)
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        retry: RetryPolicy | None = None,
        callbacks: RetryCallbacks | None = None,
        config: ClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config: ClientConfig = resolve_config(
            api_key,
            config,
            base_url=base_url,
            timeout=timeout,
            retry=retry,
            callbacks=callbacks,
        )
        self._close_client = client is None
        self._client: httpx.AsyncClient = client if client is not None else httpx.AsyncClient()
        self.transport = AsyncApiTransport(
            self._client,
            base_url=self.config.base_url,
            api_key=self.config.api_key,
            timeout=self.config.timeout,
        )
        self.executor = AsyncRetryExecutor(
            self.config.retry,
            attempt_func=self.transport.attempt,
            callbacks=self.config.callbacks,
            rng=rng,
        )
        self.results = Results(self)
        self.draws = Draws(self)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        r"""Close the underlying httpx client if this client created it."""
        if self._close_client:
            await self._client.aclose()

    async def request(
        self, method: str, path: str, params: Mapping[str, Any] | None = None
    ) -> Any:
        r"""Send a request with automatic retry logic.

        Args:
            method: The HTTP method.
            path: The API path.
            params: Optional parameters. ``None`` values are dropped.

        Returns:
            The decoded JSON payload.

        Raises:
            LoteriasApiError: If the request fails.
        """
        return await self.executor.execute(RequestDescriptor.build(method, path, params))

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        r"""Send a GET request with automatic retry logic.

        Args:
            path: The API path.
            params: Optional query parameters.

        Returns:
            The decoded JSON payload.

        Raises:
            LoteriasApiError: If the request fails.
        """
        return await self.request("GET", path, params)
