r"""Unit tests for the RetryPolicy class."""

from __future__ import annotations

import dataclasses

import pytest

from loterias.exceptions import ConfigurationError
from loterias.retry import RetryPolicy

#################################
#     Tests for RetryPolicy     #
#################################


def test_retry_policy_defaults() -> None:
    """Test the default retry policy."""
    policy = RetryPolicy()
    assert policy.enabled
    assert policy.max_retries == 3
    assert policy.base_delay_ms == 1000
    assert policy.max_delay_ms == 32000


def test_retry_policy_custom_values() -> None:
    """Test a retry policy with custom values."""
    policy = RetryPolicy(enabled=True, max_retries=5, base_delay_ms=200, max_delay_ms=5000)
    assert policy.max_retries == 5
    assert policy.base_delay_ms == 200
    assert policy.max_delay_ms == 5000


@pytest.mark.parametrize("max_retries", [0, 1, 10])
def test_retry_policy_max_retries_bounds_valid(max_retries: int) -> None:
    """Test max_retries accepts the bounds of its range."""
    assert RetryPolicy(max_retries=max_retries).max_retries == max_retries


@pytest.mark.parametrize("max_retries", [-1, 11, 15])
def test_retry_policy_max_retries_out_of_range(max_retries: int) -> None:
    """Test max_retries outside [0, 10] is rejected."""
    with pytest.raises(ConfigurationError, match=r"max_retries must be between 0 and 10"):
        RetryPolicy(max_retries=max_retries)


def test_retry_policy_negative_base_delay() -> None:
    """Test a negative base delay is rejected."""
    with pytest.raises(ConfigurationError, match=r"base_delay_ms must be >= 0, got -1"):
        RetryPolicy(base_delay_ms=-1)


def test_retry_policy_max_delay_below_base_delay() -> None:
    """Test max_delay_ms lower than base_delay_ms is rejected."""
    with pytest.raises(ConfigurationError, match=r"max_delay_ms must be >= base_delay_ms"):
        RetryPolicy(base_delay_ms=1000, max_delay_ms=500)


def test_retry_policy_max_delay_equal_base_delay() -> None:
    """Test max_delay_ms equal to base_delay_ms is accepted."""
    policy = RetryPolicy(base_delay_ms=1000, max_delay_ms=1000)
    assert policy.max_delay_ms == 1000


def test_retry_policy_zero_delays() -> None:
    """Test a policy without any delay is accepted."""
    policy = RetryPolicy(base_delay_ms=0, max_delay_ms=0)
    assert policy.base_delay_ms == 0


def test_retry_policy_configuration_error_is_value_error() -> None:
    """Test ConfigurationError can be caught as ValueError."""
    with pytest.raises(ValueError, match=r"max_retries"):
        RetryPolicy(max_retries=15)


def test_retry_policy_is_immutable() -> None:
    """Test a policy cannot be mutated after construction."""
    policy = RetryPolicy()
    with pytest.raises(dataclasses.FrozenInstanceError):
        policy.max_retries = 5  # type: ignore[misc]


def test_retry_policy_max_attempts() -> None:
    """Test max_attempts counts the first attempt."""
    assert RetryPolicy(max_retries=3).max_attempts == 4
    assert RetryPolicy(max_retries=0).max_attempts == 1


def test_retry_policy_disabled() -> None:
    """Test a disabled policy allows a single attempt."""
    policy = RetryPolicy.disabled()
    assert not policy.enabled
    assert policy.max_attempts == 1


def test_retry_policy_disabled_ignores_max_retries() -> None:
    """Test max_retries has no effect when retries are disabled."""
    assert RetryPolicy(enabled=False, max_retries=10).max_attempts == 1
