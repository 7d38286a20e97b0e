r"""Unit tests for the HTTP transports."""

from __future__ import annotations

import json

import httpx
import pytest

from loterias.outcome import HttpFailure, Success, TransportFailure
from loterias.request import RequestDescriptor
from loterias.transport import (
    ApiTransport,
    AsyncApiTransport,
    build_headers,
    is_connection_failure,
)

BASE_URL = "https://api.test/api/v1"


def make_transport(handler: httpx.MockTransport) -> ApiTransport:
    return ApiTransport(
        httpx.Client(transport=handler), base_url=BASE_URL, api_key="lat_test", timeout=5.0
    )


def raising(exc: Exception) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return httpx.MockTransport(handler)


###################################
#     Tests for build_headers     #
###################################


def test_build_headers() -> None:
    """Test the headers sent with every request."""
    assert build_headers("lat_xxx") == {
        "X-API-Key": "lat_xxx",
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


###########################################
#     Tests for is_connection_failure     #
###########################################


@pytest.mark.parametrize(
    "exc",
    [
        httpx.ConnectError("refused"),
        httpx.ConnectTimeout("timed out"),
        httpx.ReadTimeout("timed out"),
        httpx.PoolTimeout("timed out"),
    ],
)
def test_is_connection_failure_true(exc: Exception) -> None:
    """Test connection and timeout errors are connection failures."""
    assert is_connection_failure(exc)


@pytest.mark.parametrize(
    "exc",
    [httpx.ReadError("reset"), httpx.RemoteProtocolError("bad"), httpx.UnsupportedProtocol("x")],
)
def test_is_connection_failure_false(exc: Exception) -> None:
    """Test other transport errors are not connection failures."""
    assert not is_connection_failure(exc)


##################################
#     Tests for ApiTransport     #
##################################


def test_api_transport_sends_request() -> None:
    """Test the URL, headers and query string of a GET request."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": []})

    transport = make_transport(httpx.MockTransport(handler))
    outcome = transport.attempt(
        RequestDescriptor.build("GET", "/results/euromillones/check", {"numbers": [4, 15]})
    )

    assert isinstance(outcome, Success)
    assert outcome.status_code == 200
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/api/v1/results/euromillones/check"
    assert request.url.params["numbers"] == "4,15"
    assert request.headers["X-API-Key"] == "lat_test"
    assert request.headers["Accept"] == "application/json"


def test_api_transport_sends_json_body() -> None:
    """Test the parameters of a POST request are sent as JSON."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={})

    transport = make_transport(httpx.MockTransport(handler))
    transport.attempt(RequestDescriptor.build("POST", "/tickets", {"drawId": "d1"}))

    assert json.loads(seen[0].content) == {"drawId": "d1"}


def test_api_transport_strips_trailing_slash() -> None:
    """Test a trailing slash of the base URL is not doubled."""
    transport = ApiTransport(
        httpx.Client(),
        base_url=BASE_URL + "/",
        api_key="k",
        timeout=1,
    )
    assert transport.base_url == BASE_URL


def test_api_transport_error_status() -> None:
    """Test an error status becomes an HttpFailure."""
    transport = make_transport(
        httpx.MockTransport(
            lambda request: httpx.Response(
                429, headers={"Retry-After": "5"}, json={"error": {"code": "RATE_LIMITED"}}
            )
        )
    )
    outcome = transport.attempt(RequestDescriptor.build("GET", "/results/latest"))

    assert isinstance(outcome, HttpFailure)
    assert outcome.status_code == 429
    assert outcome.retry_after == "5"


def test_api_transport_connection_failure() -> None:
    """Test a connection error becomes a retryable TransportFailure."""
    exc = httpx.ConnectError("Connection refused")
    outcome = make_transport(raising(exc)).attempt(RequestDescriptor.build("GET", "/results"))

    assert isinstance(outcome, TransportFailure)
    assert outcome.connection_failure
    assert outcome.cause is exc


def test_api_transport_timeout() -> None:
    """Test a timeout becomes a retryable TransportFailure."""
    outcome = make_transport(raising(httpx.ReadTimeout("timed out"))).attempt(
        RequestDescriptor.build("GET", "/results")
    )
    assert isinstance(outcome, TransportFailure)
    assert outcome.connection_failure


def test_api_transport_other_transport_error() -> None:
    """Test another transport error becomes a non-retryable
    TransportFailure."""
    outcome = make_transport(raising(httpx.ReadError("reset"))).attempt(
        RequestDescriptor.build("GET", "/results")
    )
    assert isinstance(outcome, TransportFailure)
    assert not outcome.connection_failure


def test_api_transport_programming_error_propagates() -> None:
    """Test exceptions that are not transport errors propagate."""
    with pytest.raises(RuntimeError, match=r"bug"):
        make_transport(raising(RuntimeError("bug"))).attempt(
            RequestDescriptor.build("GET", "/results")
        )


#######################################
#     Tests for AsyncApiTransport     #
#######################################


@pytest.mark.asyncio
async def test_async_api_transport_success() -> None:
    """Test a successful async attempt."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": []})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        transport = AsyncApiTransport(client, base_url=BASE_URL, api_key="lat_test", timeout=5)
        outcome = await transport.attempt(RequestDescriptor.build("GET", "/draws/upcoming/next"))

    assert isinstance(outcome, Success)
    assert seen[0].url == "https://api.test/api/v1/draws/upcoming/next"
    assert seen[0].headers["X-API-Key"] == "lat_test"


@pytest.mark.asyncio
async def test_async_api_transport_connection_failure() -> None:
    """Test an async connection error becomes a TransportFailure."""
    async with httpx.AsyncClient(transport=raising(httpx.ConnectError("refused"))) as client:
        transport = AsyncApiTransport(client, base_url=BASE_URL, api_key="k", timeout=5)
        outcome = await transport.attempt(RequestDescriptor.build("GET", "/draws/upcoming"))

    assert isinstance(outcome, TransportFailure)
    assert outcome.connection_failure
