r"""Base class of the API resources."""

from __future__ import annotations

__all__ = ["BaseResource", "format_date", "game_slug", "path_segment"]

from datetime import date
from typing import TYPE_CHECKING, Any, Protocol
from urllib.parse import quote

from loterias.enums import GameType

if TYPE_CHECKING:
    from collections.abc import Mapping


class SupportsGet(Protocol):
    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any: ...


def path_segment(value: str) -> str:
    r"""Percent-encode a value used as a single path segment.

    Args:
        value: The value.

    Returns:
        The encoded value.
    """
    return quote(value, safe="")


def game_slug(game: GameType | str) -> str:
    r"""Return the path segment of a game.

    Args:
        game: A ``GameType`` member or a game slug.

    Returns:
        The game slug.

    Example:
        ```pycon
        >>> from loterias.enums import GameType
        >>> from loterias.resources.base import game_slug
        >>> game_slug(GameType.GORDO)
        'gordo'
        >>> game_slug("bonoloto")
        'bonoloto'

        ```
    """
    if isinstance(game, GameType):
        return game.value
    return path_segment(str(game))


def format_date(value: date | str) -> str:
    r"""Return a date in the ``YYYY-MM-DD`` format used by the API.

    Args:
        value: A date, or a string already in ``YYYY-MM-DD`` format.

    Returns:
        The formatted date.
    """
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return quote(value, safe="-")


class BaseResource:
    r"""Group of API operations sharing a path prefix.

    The resource only builds paths and parameters; the request itself is
    performed by the client, so the same resource class serves the
    synchronous client (methods return the payload) and the
    asynchronous client (methods return an awaitable).

    Args:
        client: The client performing the requests.
    """

    def __init__(self, client: SupportsGet) -> None:
        self._client = client

    def _get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return self._client.get(path, params)
