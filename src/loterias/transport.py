r"""HTTP transports performing single attempts against the Loterias API.

A transport sends one request with httpx and converts whatever happens
into an attempt outcome: a response (successful or not) or a transport
failure. It never retries; retrying is the job of the executors in
``loterias.retry``.
"""

from __future__ import annotations

__all__ = ["ApiTransport", "AsyncApiTransport", "build_headers", "is_connection_failure"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from loterias.outcome import TransportFailure, from_response

if TYPE_CHECKING:
    from loterias.outcome import AttemptOutcome
    from loterias.request import RequestDescriptor

logger: logging.Logger = logging.getLogger(__name__)

# Failures raised before any response could be obtained from the server
CONNECTION_FAILURES: tuple[type[Exception], ...] = (httpx.ConnectError, httpx.TimeoutException)


def build_headers(api_key: str) -> dict[str, str]:
    r"""Return the headers sent with every request.

    Args:
        api_key: The API key.

    Returns:
        The request headers.

    Example:
        ```pycon
        >>> from loterias.transport import build_headers
        >>> build_headers("lat_xxx")
        {'X-API-Key': 'lat_xxx', 'Content-Type': 'application/json', 'Accept': 'application/json'}

        ```
    """
    return {
        "X-API-Key": api_key,
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def is_connection_failure(exc: Exception) -> bool:
    r"""Return ``True`` if the exception means the server could not be
    reached.

    Args:
        exc: The exception raised by httpx.

    Returns:
        Whether the exception is a connection failure (connection
        refused, DNS failure, timeout).
    """
    return isinstance(exc, CONNECTION_FAILURES)


class _BaseTransport:
    def __init__(self, base_url: str, api_key: str, timeout: float) -> None:
        self.base_url = base_url.rstrip("/")
        self.headers = build_headers(api_key)
        self.timeout = timeout

    def _request_kwargs(self, request: RequestDescriptor) -> dict[str, Any]:
        return {
            "method": request.method,
            "url": f"{self.base_url}{request.path}",
            "headers": self.headers,
            "timeout": self.timeout,
            **request.to_httpx_kwargs(),
        }

    def _transport_failure(
        self, exc: httpx.RequestError, request: RequestDescriptor
    ) -> TransportFailure:
        connection_failure = is_connection_failure(exc)
        logger.debug(
            f"{request.method} {request.path} raised {type(exc).__name__} "
            f"(connection failure: {connection_failure}): {exc}"
        )
        return TransportFailure(cause=exc, connection_failure=connection_failure)


class ApiTransport(_BaseTransport):
    r"""Performs single HTTP attempts with a synchronous httpx client.

    Args:
        client: The httpx client used to send the requests.
        base_url: Base URL of the API.
        api_key: The API key sent in the ``X-API-Key`` header.
        timeout: Timeout in seconds of one attempt.

    Example:
        ```pycon
        >>> import httpx
        >>> from loterias.request import RequestDescriptor
        >>> from loterias.transport import ApiTransport
        >>> mock = httpx.MockTransport(lambda request: httpx.Response(200, json={"data": []}))
        >>> transport = ApiTransport(
        ...     httpx.Client(transport=mock), base_url="https://api.test", api_key="key", timeout=5
        ... )
        >>> transport.attempt(RequestDescriptor.build("GET", "/results")).status_code
        200

        ```
    """

    def __init__(self, client: httpx.Client, base_url: str, api_key: str, timeout: float) -> None:
        super().__init__(base_url=base_url, api_key=api_key, timeout=timeout)
        self.client = client

    def attempt(self, request: RequestDescriptor) -> AttemptOutcome:
        r"""Send the request once.

        Args:
            request: The request to send.

        Returns:
            The outcome of the attempt.
        """
        try:
            response = self.client.request(**self._request_kwargs(request))
        except httpx.RequestError as exc:
            return self._transport_failure(exc, request)
        return from_response(response)


class AsyncApiTransport(_BaseTransport):
    r"""Performs single HTTP attempts with an asynchronous httpx client.

    Args:
        client: The httpx async client used to send the requests.
        base_url: Base URL of the API.
        api_key: The API key sent in the ``X-API-Key`` header.
        timeout: Timeout in seconds of one attempt.
    """

    def __init__(
        self, client: httpx.AsyncClient, base_url: str, api_key: str, timeout: float
    ) -> None:
        super().__init__(base_url=base_url, api_key=api_key, timeout=timeout)
        self.client = client

    async def attempt(self, request: RequestDescriptor) -> AttemptOutcome:
        r"""Send the request once.

        Args:
            request: The request to send.

        Returns:
            The outcome of the attempt.
        """
        try:
            response = await self.client.request(**self._request_kwargs(request))
        except httpx.RequestError as exc:
            return self._transport_failure(exc, request)
        return from_response(response)
