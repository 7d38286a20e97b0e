r"""Outcome of a single HTTP attempt.

An attempt ends in exactly one of three ways:

- ``Success``: an HTTP response with a status code below 400.
- ``HttpFailure``: an HTTP response with a status code of 400 or more.
- ``TransportFailure``: no HTTP response was obtained. The
  ``connection_failure`` flag tells apart failures to reach the server
  (connection refused, DNS failure, timeout) from other transport errors.

Outcomes are produced by the transport, consumed by the retry decider
and strategy, and never stored.
"""

from __future__ import annotations

__all__ = ["AttemptOutcome", "HttpFailure", "Success", "TransportFailure", "from_response"]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx


@dataclass(frozen=True)
class Success:
    r"""A response with a non-error status code.

    Attributes:
        status_code: The HTTP status code.
        body: The raw response body.
        headers: The response headers.
    """

    status_code: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpFailure:
    r"""A response with an error status code (>= 400).

    Attributes:
        status_code: The HTTP status code.
        headers: The response headers, used to read ``Retry-After``.
        body: The raw response body, expected to hold the API error
            envelope.
    """

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def retry_after(self) -> str | None:
        r"""The raw ``Retry-After`` header value, if any."""
        for name, value in self.headers.items():
            if name.lower() == "retry-after":
                return value
        return None


@dataclass(frozen=True)
class TransportFailure:
    r"""An attempt that did not produce any HTTP response.

    Attributes:
        cause: The exception raised by the transport.
        connection_failure: ``True`` if the server could not be reached
            (connection refused, DNS failure, timeout).
    """

    cause: Exception
    connection_failure: bool = False


AttemptOutcome = Union[Success, HttpFailure, TransportFailure]


def from_response(response: httpx.Response) -> Success | HttpFailure:
    r"""Convert an ``httpx.Response`` into an attempt outcome.

    Args:
        response: The response to convert. Its body must already be
            loaded.

    Returns:
        ``HttpFailure`` if the status code is >= 400, otherwise
        ``Success``.

    Example:
        ```pycon
        >>> import httpx
        >>> from loterias.outcome import from_response
        >>> from_response(httpx.Response(503, headers={"Retry-After": "2"})).retry_after
        '2'
        >>> from_response(httpx.Response(200, json={"data": []})).status_code
        200

        ```
    """
    headers = dict(response.headers.items())
    if response.status_code >= 400:
        return HttpFailure(
            status_code=response.status_code, headers=headers, body=response.content
        )
    return Success(status_code=response.status_code, body=response.content, headers=headers)
