from __future__ import annotations

import random
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from loterias.outcome import HttpFailure, Success
from loterias.request import RequestDescriptor

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def no_jitter_rng() -> random.Random:
    """Create a random source whose jitter is always zero."""
    return Mock(spec=random.Random, uniform=Mock(return_value=0.0))


@pytest.fixture
def request_descriptor() -> RequestDescriptor:
    """Create the descriptor of a GET request on the latest results."""
    return RequestDescriptor.build("GET", "/results/euromillones/latest")


@pytest.fixture
def success() -> Success:
    """Create a successful outcome with a small JSON payload."""
    return Success(200, b'{"data": {"drawId": "em-2024-001"}}')


@pytest.fixture
def rate_limited() -> HttpFailure:
    """Create a 429 outcome without Retry-After header."""
    return HttpFailure(429, body=b'{"error": {"code": "RATE_LIMITED", "message": "Slow down"}}')


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()
