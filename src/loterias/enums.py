r"""Enumerations of the Loterias API."""

from __future__ import annotations

__all__ = ["GameType"]

import enum


class GameType(str, enum.Enum):
    r"""Lottery games available in the API.

    The member values are the slugs used in the API paths.

    Example:
        ```pycon
        >>> from loterias.enums import GameType
        >>> GameType.EUROMILLONES.value
        'euromillones'
        >>> GameType("primitiva") is GameType.PRIMITIVA
        True

        ```
    """

    BONOLOTO = "bonoloto"
    EUROMILLONES = "euromillones"
    LOTOTURF = "lototurf"
    PRIMITIVA = "primitiva"
    GORDO = "gordo"
    QUINIELA = "quiniela"
    QUINIGOL = "quinigol"
    QUINTUPLE = "quintuple"
    NACIONAL = "nacional"
    EURODREAMS = "eurodreams"

    def __str__(self) -> str:
        return self.value
