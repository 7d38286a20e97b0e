r"""Request descriptors for the Loterias API.

A ``RequestDescriptor`` holds everything needed to send one logical
request: the HTTP method, the API path and the cleaned parameters. It is
built once per call and reused, unchanged, by every attempt.
"""

from __future__ import annotations

__all__ = ["RequestDescriptor", "clean_params"]

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any


def _format_value(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    return value


def clean_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    r"""Clean request parameters before sending them.

    Parameters set to ``None`` are removed, sequences and the values of
    mappings are collapsed to a comma-separated string, enum members are
    replaced by their value, booleans by ``"true"``/``"false"`` and dates
    by their ISO format.

    Args:
        params: The raw parameters.

    Returns:
        The cleaned parameters.

    Example:
        ```pycon
        >>> from loterias.request import clean_params
        >>> clean_params({"numbers": [4, 15, 23], "drawId": None, "page": 2})
        {'numbers': '4,15,23', 'page': 2}

        ```
    """
    cleaned = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            value = list(value.values())
        if isinstance(value, (list, tuple, set, frozenset)):
            cleaned[key] = ",".join(str(_format_value(item)) for item in value)
        else:
            cleaned[key] = _format_value(value)
    return cleaned


@dataclass(frozen=True)
class RequestDescriptor:
    r"""Description of one logical API request.

    Args:
        method: The HTTP method, upper-cased.
        path: The API path relative to the base URL
            (e.g. ``"/results/euromillones/latest"``).
        params: The cleaned parameters. Use ``RequestDescriptor.build``
            to clean raw parameters.

    Example:
        ```pycon
        >>> from loterias.request import RequestDescriptor
        >>> request = RequestDescriptor.build("get", "/results", {"page": 1, "game": None})
        >>> request.method, request.params
        ('GET', {'page': 1})
        >>> request.to_httpx_kwargs()
        {'params': {'page': 1}}

        ```
    """

    method: str
    path: str
    params: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def build(
        cls, method: str, path: str, params: Mapping[str, Any] | None = None
    ) -> RequestDescriptor:
        r"""Create a descriptor, cleaning the parameters.

        Args:
            method: The HTTP method.
            path: The API path.
            params: The raw parameters.

        Returns:
            The request descriptor.
        """
        return cls(method=method.upper(), path=path, params=clean_params(params))

    def to_httpx_kwargs(self) -> dict[str, Any]:
        r"""Return the keyword arguments carrying the parameters for
        ``httpx.Client.request``.

        GET requests send the parameters as query string, the other
        methods as a JSON body.

        Returns:
            The keyword arguments, empty if there is no parameter.
        """
        if not self.params:
            return {}
        if self.method == "GET":
            return {"params": dict(self.params)}
        return {"json": dict(self.params)}
