r"""Utility functions for Retry-After parsing and response decoding."""

from __future__ import annotations

__all__ = ["build_error", "decode_payload", "parse_retry_after"]

from loterias.utils.response import build_error, decode_payload
from loterias.utils.retry_after import parse_retry_after
