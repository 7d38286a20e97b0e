r"""Draws API: query upcoming draws."""

from __future__ import annotations

__all__ = ["Draws"]

from typing import TYPE_CHECKING, Any

from loterias.resources.base import BaseResource, game_slug, path_segment

if TYPE_CHECKING:
    from loterias.enums import GameType


class Draws(BaseResource):
    r"""Draws API."""

    def list_upcoming(self, **params: Any) -> Any:
        r"""Get all upcoming draws.

        Args:
            **params: Filter parameters.
        """
        return self._get("/draws/upcoming", params)

    def get_next_all(self) -> Any:
        r"""Get the next draw of each game."""
        return self._get("/draws/upcoming/next")

    def list_upcoming_by_game(self, game: GameType | str, **params: Any) -> Any:
        r"""Get the upcoming draws of a game.

        Args:
            game: The game.
            **params: Filter parameters.
        """
        return self._get(f"/draws/upcoming/{game_slug(game)}", params)

    def get_by_id(self, draw_id: str) -> Any:
        r"""Get a draw by ID.

        Args:
            draw_id: The draw ID.
        """
        return self._get(f"/draws/{path_segment(draw_id)}")
