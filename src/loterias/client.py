r"""Synchronous client for the Loterias API.

This module provides ``LoteriasApi``, the entry point of the library. It
wires an httpx client, a transport and a retry executor together, and
exposes the API resources.
"""

from __future__ import annotations

__all__ = ["LoteriasApi"]

from typing import TYPE_CHECKING, Any

import httpx

from loterias.config import ClientConfig
from loterias.request import RequestDescriptor
from loterias.resources import Draws, Results
from loterias.retry.executor import RetryExecutor
from loterias.transport import ApiTransport

if TYPE_CHECKING:
    import random
    import threading
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

    from loterias.callbacks import RetryCallbacks
    from loterias.retry.policy import RetryPolicy


def resolve_config(
    api_key: str | None,
    config: ClientConfig | None,
    **overrides: Any,
) -> ClientConfig:
    r"""Build the configuration of a client from its constructor arguments.

    Args:
        api_key: The API key, overriding the one of ``config``.
        config: Optional base configuration.
        **overrides: Other parameters overriding ``config``. ``None``
            values are ignored.

    Returns:
        The configuration.

    Raises:
        ConfigurationError: If no API key is given or a parameter is
            invalid.
    """
    if config is None:
        config = ClientConfig(api_key=api_key or "")
    return config.merge(api_key=api_key or None, **overrides)


class LoteriasApi:
    r"""Client for the Loterias API.

    Requests that fail with a transient error (429, 5xx, connection
    failure) are retried with exponential backoff, following the retry
    policy of the configuration.

    The client can be used as a context manager. The underlying
    ``httpx.Client`` is closed on exit, unless it was passed by the caller,
    in which case its lifecycle is left to the caller.

    Args:
        api_key: The API key. Required unless ``config`` is given.
        base_url: Base URL of the API.
        timeout: Timeout in seconds of one attempt.
        retry: The retry policy.
        callbacks: Optional lifecycle callbacks.
        config: Optional configuration. The other arguments override it.
        client: Optional ``httpx.Client`` used to send the requests.
        rng: Optional random source for the retry jitter.

    Raises:
        ConfigurationError: If the configuration is invalid.

    Example:
        ```pycon
        >>> from loterias import GameType, LoteriasApi
        >>> with LoteriasApi("lat_xxx") as api:  # doctest: +SKIP
        ...     result = api.results.get_latest(GameType.EUROMILLONES)
        ...     print(result["data"]["combination"])
        ...

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
        client: httpx.Client | None = None,
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
        self._client: httpx.Client = client if client is not None else httpx.Client()
        self.transport = ApiTransport(
            self._client,
            base_url=self.config.base_url,
            api_key=self.config.api_key,
            timeout=self.config.timeout,
        )
        self.executor = RetryExecutor(
            self.config.retry,
            attempt_func=self.transport.attempt,
            callbacks=self.config.callbacks,
            rng=rng,
        )
        self.results = Results(self)
        self.draws = Draws(self)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        r"""Close the underlying httpx client if this client created it."""
        if self._close_client:
            self._client.close()

    def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        cancel_event: threading.Event | None = None,
    ) -> Any:
        r"""Send a request with automatic retry logic.

        Args:
            method: The HTTP method.
            path: The API path (e.g. ``"/results/latest"``).
            params: Optional parameters. ``None`` values are dropped.
                They are sent as query string for GET requests and as a
                JSON body otherwise.
            cancel_event: Optional event cancelling the request while it
                waits for a retry.

        Returns:
            The decoded JSON payload.

        Raises:
            LoteriasApiError: If the request fails.
        """
        return self.executor.execute(
            RequestDescriptor.build(method, path, params), cancel_event=cancel_event
        )

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        r"""Send a GET request with automatic retry logic.

        Args:
            path: The API path.
            params: Optional query parameters.

        Returns:
            The decoded JSON payload.

        Raises:
            LoteriasApiError: If the request fails.
        """
        return self.request("GET", path, params)
