"""Tests for response code descriptions."""

import pytest

from paymill_models.domain.response_codes import (
    UNKNOWN_RESPONSE_CODE,
    describe_response_code,
    is_success,
)


@pytest.mark.parametrize(
    "code, expected",
    [
        (20000, "General success response"),
        ("20000", "General success response"),
        (50102, "Card declined by authorization system"),
        (40103, "Limit exceeded"),
    ],
)
def test_documented_codes(code, expected):
    """Test documented response codes."""
    assert describe_response_code(code) == expected


def test_category_fallback():
    """Test that undocumented codes fall back to their category."""
    assert describe_response_code(40999) == "Problem with data"
    assert describe_response_code(21999) == "Success"


@pytest.mark.parametrize("code", [99999, 42, "n/a", None])
def test_unknown_codes(code):
    """Test codes outside every category."""
    assert describe_response_code(code) == UNKNOWN_RESPONSE_CODE


def test_is_success():
    """Test the success family check."""
    assert is_success(20000) is True
    assert is_success("20101") is True
    assert is_success(50102) is False
    assert is_success(None) is False
