"""Tests for scalar coercion."""

from decimal import Decimal

import pytest

from paymill_models.domain.entities import ScalarType
from paymill_models.mapping.coercion import coerce_scalar


@pytest.mark.parametrize(
    "value, expected",
    [
        ("4200", "4200"),
        (4200, "4200"),
        (4200.0, "4200"),
        (42.5, "42.5"),
        (Decimal("42.50"), "42.50"),
        (True, "true"),
        (False, "false"),
    ],
)
def test_coerce_string(value, expected):
    """Test coercion to string."""
    assert coerce_scalar(value, ScalarType.STRING) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (20000, 20000),
        ("20000", 20000),
        (" 12 ", 12),
        ("12.0", 12),
        (12.0, 12),
        ("-5", -5),
    ],
)
def test_coerce_integer(value, expected):
    """Test coercion to integer."""
    assert coerce_scalar(value, ScalarType.INTEGER) == expected


@pytest.mark.parametrize("value", ["12.5", "abc", 12.5, ""])
def test_coerce_integer_rejects_non_integral(value):
    """Test that non-integral values are rejected."""
    with pytest.raises(ValueError):
        coerce_scalar(value, ScalarType.INTEGER)


@pytest.mark.parametrize("value", [True, [1], {"a": 1}])
def test_coerce_integer_rejects_wrong_type(value):
    """Test that bools and containers are rejected."""
    with pytest.raises(TypeError):
        coerce_scalar(value, ScalarType.INTEGER)


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, True),
        (False, False),
        ("true", True),
        ("FALSE", False),
        ("1", True),
        ("0", False),
        (1, True),
        (0, False),
    ],
)
def test_coerce_boolean(value, expected):
    """Test coercion to boolean."""
    assert coerce_scalar(value, ScalarType.BOOLEAN) is expected


def test_coerce_boolean_rejects_unknown():
    """Test that unknown boolean strings and numbers are rejected."""
    with pytest.raises(ValueError):
        coerce_scalar("maybe", ScalarType.BOOLEAN)
    with pytest.raises(TypeError):
        coerce_scalar(2, ScalarType.BOOLEAN)


def test_coerce_float():
    """Test coercion to float."""
    assert coerce_scalar("19.5", ScalarType.FLOAT) == 19.5
    assert coerce_scalar(19, ScalarType.FLOAT) == 19.0
    with pytest.raises(ValueError):
        coerce_scalar("nineteen", ScalarType.FLOAT)


def test_coerce_string_rejects_containers():
    """Test that lists cannot be coerced to strings."""
    with pytest.raises(TypeError):
        coerce_scalar(["4200"], ScalarType.STRING)


@pytest.mark.parametrize("scalar_type", list(ScalarType))
def test_none_passes_through(scalar_type):
    """Test that None is kept for every type."""
    assert coerce_scalar(None, scalar_type) is None


def test_raw_passes_through():
    """Test that raw values are returned unchanged."""
    value = {"active": 3, "inactive": 0}
    assert coerce_scalar(value, ScalarType.RAW) is value


@pytest.mark.parametrize("value", ["Infinity", "-Infinity", "NaN", "sNaN"])
def test_coerce_integer_rejects_non_finite(value):
    """Test that non-finite numeric strings are rejected as ValueError."""
    with pytest.raises(ValueError):
        coerce_scalar(value, ScalarType.INTEGER)
