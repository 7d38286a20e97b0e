r"""Retry-After header parsing utilities.

This module provides functions for parsing the Retry-After header value
from HTTP responses according to RFC 7231.
"""

from __future__ import annotations

__all__ = ["parse_retry_after", "utcnow"]

import logging
import math
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(timezone.utc)


def parse_retry_after(
    retry_after_header: str | None,
    now: Callable[[], datetime] = utcnow,
) -> float | None:
    """Parse the Retry-After header value of an HTTP response.

    The header can take two forms (RFC 7231):

    1. A number of seconds to wait (e.g. ``"120"``).
    2. An HTTP-date (e.g. ``"Wed, 21 Oct 2015 07:28:00 GMT"``). The wait
       is the time left until that date, or 0 if the date is in the past.

    Args:
        retry_after_header: The header value, or ``None`` if the response
            has no such header.
        now: Function returning the current time as a timezone-aware
            datetime. Used for HTTP-date values.

    Returns:
        The number of seconds to wait, or ``None`` if the header is absent
        or cannot be parsed.

    Example:
        ```pycon
        >>> from loterias.utils import parse_retry_after
        >>> parse_retry_after("120")
        120.0
        >>> parse_retry_after("0")
        0.0
        >>> parse_retry_after(None) is None
        True
        >>> parse_retry_after("invalid") is None
        True

        ```
    """
    if retry_after_header is None:
        return None

    value = retry_after_header.strip()
    try:
        seconds = float(value)
    except ValueError:
        pass
    else:
        if math.isfinite(seconds):
            return seconds
        logger.debug(f"Ignoring non-finite Retry-After header: {retry_after_header!r}")
        return None

    try:
        retry_date = parsedate_to_datetime(value)
    except (ValueError, TypeError, IndexError, OverflowError):
        logger.debug(f"Failed to parse Retry-After header: {retry_after_header!r}")
        return None
    if retry_date.tzinfo is None:
        retry_date = retry_date.replace(tzinfo=timezone.utc)
    return max(0.0, (retry_date - now()).total_seconds())
