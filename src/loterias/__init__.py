r"""loterias - Python client for the Loterias lottery-data API.

This package exposes the results and upcoming draws of the Loterias API
through typed resource methods. Requests are sent with httpx and
transient failures are retried transparently.

Key Features:
    - Results and draws resources for every game (``GameType``)
    - Automatic retry for transient HTTP errors (429, 500, 502, 503, 504)
      and connection failures
    - Exponential backoff with +/-10% jitter, capped per delay
    - Retry-After header support (both integer seconds and HTTP-date formats)
    - Synchronous and asyncio clients
    - Callback system for observability (logging, metrics, alerting)

Example:
    ```pycon
    >>> from loterias import GameType, LoteriasApi, RetryPolicy
    >>> api = LoteriasApi("lat_xxx", retry=RetryPolicy(max_retries=5))  # doctest: +SKIP
    >>> check = api.results.check_numbers(
    ...     GameType.EUROMILLONES, numbers=[4, 15, 23, 38, 42], extra_numbers=[3, 11]
    ... )  # doctest: +SKIP
    >>> check["data"]["isWinner"]  # doctest: +SKIP
    False

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncLoteriasApi",
    "ClientConfig",
    "ConfigurationError",
    "GameType",
    "LoteriasApi",
    "LoteriasApiError",
    "NetworkError",
    "RequestCancelledError",
    "RetryPolicy",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from loterias.client import LoteriasApi
from loterias.client_async import AsyncLoteriasApi
from loterias.config import ClientConfig
from loterias.enums import GameType
from loterias.exceptions import (
    ConfigurationError,
    LoteriasApiError,
    NetworkError,
    RequestCancelledError,
)
from loterias.retry.policy import RetryPolicy

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
