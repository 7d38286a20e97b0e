r"""Results API: query lottery results."""

from __future__ import annotations

__all__ = ["Results"]

from typing import TYPE_CHECKING, Any

from loterias.resources.base import BaseResource, format_date, game_slug, path_segment

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from loterias.enums import GameType


class Results(BaseResource):
    r"""Results API.

    Example:
        ```pycon
        >>> from loterias import GameType, LoteriasApi
        >>> with LoteriasApi("lat_xxx") as api:  # doctest: +SKIP
        ...     result = api.results.get_latest(GameType.EUROMILLONES)
        ...     check = api.results.check_numbers(
        ...         GameType.EUROMILLONES, numbers=[4, 15, 23, 38, 42], extra_numbers=[3, 11]
        ...     )
        ...

        ```
    """

    def list(self, **params: Any) -> Any:
        r"""Get all results, with optional filtering and pagination.

        Args:
            **params: Filter parameters (e.g. ``page``, ``limit``).
        """
        return self._get("/results", params)

    def get_latest_all(self) -> Any:
        r"""Get the latest result of each game."""
        return self._get("/results/latest")

    def list_by_game(self, game: GameType | str, **params: Any) -> Any:
        r"""Get the results of a game.

        Args:
            game: The game.
            **params: Filter parameters.
        """
        return self._get(f"/results/{game_slug(game)}", params)

    def get_latest(self, game: GameType | str) -> Any:
        r"""Get the latest result of a game.

        Args:
            game: The game.
        """
        return self._get(f"/results/{game_slug(game)}/latest")

    def get_by_date(self, game: GameType | str, draw_date: date | str) -> Any:
        r"""Get the results of a game on a given date.

        Args:
            game: The game.
            draw_date: The date, as a ``date`` or a ``YYYY-MM-DD`` string.
        """
        return self._get(f"/results/{game_slug(game)}/date/{format_date(draw_date)}")

    def get_by_date_range(
        self,
        game: GameType | str,
        from_date: date | str,
        to_date: date | str,
        page: int = 1,
        limit: int = 10,
    ) -> Any:
        r"""Get the results of a game within a date range.

        Args:
            game: The game.
            from_date: Start of the range.
            to_date: End of the range.
            page: Page number.
            limit: Number of items per page.
        """
        return self._get(
            f"/results/{game_slug(game)}/range",
            {
                "from": format_date(from_date),
                "to": format_date(to_date),
                "page": page,
                "limit": limit,
            },
        )

    def get_by_draw_id(self, game: GameType | str, draw_id: str) -> Any:
        r"""Get a draw result by ID.

        Args:
            game: The game.
            draw_id: The draw ID.
        """
        return self._get(f"/results/{game_slug(game)}/{path_segment(draw_id)}")

    def check_numbers(
        self,
        game: GameType | str,
        numbers: Iterable[int],
        extra_numbers: Iterable[int] | None = None,
        draw_id: str | None = None,
    ) -> Any:
        r"""Check numbers against a draw.

        Args:
            game: The game.
            numbers: The main numbers to check.
            extra_numbers: Extra numbers (e.g. the stars of Euromillones).
            draw_id: The draw to check against. Defaults to the latest
                draw.
        """
        return self._get(
            f"/results/{game_slug(game)}/check",
            {
                "numbers": list(numbers),
                "extraNumbers": None if extra_numbers is None else list(extra_numbers),
                "drawId": draw_id,
            },
        )
