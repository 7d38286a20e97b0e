r"""Configuration defaults and the client configuration dataclass.

This module provides the default values used by the Loterias API
client and a dataclass-based configuration object shared by
``LoteriasApi`` and ``AsyncLoteriasApi``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY_MS",
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_DELAY_MS",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "MAX_RETRIES_LIMIT",
    "RETRY_STATUS_CODES",
    "ClientConfig",
]

import os
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from loterias.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from loterias.callbacks import RetryCallbacks
    from loterias.retry.policy import RetryPolicy

DEFAULT_BASE_URL = "https://api.loterias-api.com/api/v1"

# Default timeout in seconds for a single HTTP attempt
DEFAULT_TIMEOUT = 30.0

# Default maximum number of retries
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 3

# Wait time = base_delay_ms * (2 ** attempt), +/-10% jitter
# With 1000: 1st retry waits ~1s, 2nd ~2s, 3rd ~4s
DEFAULT_BASE_DELAY_MS = 1000

# Upper bound of any single wait, Retry-After hints included
DEFAULT_MAX_DELAY_MS = 32000

MAX_RETRIES_LIMIT = 10

# HTTP status codes that should trigger automatic retry
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)

ENV_API_KEY = "LOTERIAS_API_KEY"
ENV_BASE_URL = "LOTERIAS_API_BASE_URL"
ENV_TIMEOUT = "LOTERIAS_API_TIMEOUT"
ENV_MAX_RETRIES = "LOTERIAS_API_MAX_RETRIES"
ENV_RETRY_ENABLED = "LOTERIAS_API_RETRY_ENABLED"


def _default_retry_policy() -> RetryPolicy:
    from loterias.retry.policy import RetryPolicy  # noqa: PLC0415

    return RetryPolicy()


def _default_callbacks() -> RetryCallbacks:
    from loterias.callbacks import RetryCallbacks  # noqa: PLC0415

    return RetryCallbacks()


@dataclass
class ClientConfig:
    r"""Configuration of a Loterias API client.

    Args:
        api_key: The API key sent in the ``X-API-Key`` header. Must not
            be empty.
        base_url: Base URL of the API. A trailing ``/`` is removed.
        timeout: Timeout in seconds of a single HTTP attempt. Must be > 0.
        retry: The retry policy shared by all the requests of the client.
        callbacks: Optional lifecycle callbacks.

    Raises:
        ConfigurationError: If any parameter is invalid.

    Example:
        ```pycon
        >>> from loterias.config import ClientConfig
        >>> config = ClientConfig(api_key="lat_xxx", base_url="https://example.com/api/")
        >>> config.base_url
        'https://example.com/api'
        >>> config.retry.max_retries
        3
        >>> config.merge(timeout=5).timeout
        5

        ```
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    retry: RetryPolicy = field(default_factory=_default_retry_policy)
    callbacks: RetryCallbacks = field(default_factory=_default_callbacks)

    def __post_init__(self) -> None:
        if not self.api_key:
            msg = "api_key is required"
            raise ConfigurationError(msg)
        if not self.base_url:
            msg = "base_url is required"
            raise ConfigurationError(msg)
        if self.timeout <= 0:
            msg = f"timeout must be > 0, got {self.timeout}"
            raise ConfigurationError(msg)
        self.base_url = self.base_url.rstrip("/")

    def merge(self, **overrides: Any) -> ClientConfig:
        r"""Create a new config with the specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for the parameters to override.

        Returns:
            A new ``ClientConfig`` instance with the overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        r"""Create a config from environment variables.

        The following variables are read:

        - ``LOTERIAS_API_KEY`` (required)
        - ``LOTERIAS_API_BASE_URL``
        - ``LOTERIAS_API_TIMEOUT`` (seconds)
        - ``LOTERIAS_API_MAX_RETRIES``
        - ``LOTERIAS_API_RETRY_ENABLED`` (``"0"``, ``"false"``, ``"no"``
          or ``"off"`` disable retries)

        Args:
            environ: The mapping to read from. Defaults to ``os.environ``.

        Returns:
            The configuration.

        Raises:
            ConfigurationError: If a variable is missing or invalid.
        """
        from loterias.retry.policy import RetryPolicy  # noqa: PLC0415

        env = os.environ if environ is None else environ
        try:
            timeout = float(env.get(ENV_TIMEOUT, DEFAULT_TIMEOUT))
            max_retries = int(env.get(ENV_MAX_RETRIES, DEFAULT_MAX_RETRIES))
        except ValueError as exc:
            msg = f"invalid numeric value in environment: {exc}"
            raise ConfigurationError(msg) from exc
        enabled = env.get(ENV_RETRY_ENABLED, "true").strip().lower() not in {
            "0",
            "false",
            "no",
            "off",
        }
        return cls(
            api_key=env.get(ENV_API_KEY, ""),
            base_url=env.get(ENV_BASE_URL, DEFAULT_BASE_URL),
            timeout=timeout,
            retry=RetryPolicy(enabled=enabled, max_retries=max_retries),
        )
