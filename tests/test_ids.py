"""Tests for query id parsing"""
import pytest

from market_cart.utils.ids import parse_id


@pytest.mark.parametrize(
    "raw, expected",
    [("1", 1), (" 42 ", 42), ("0", 0), ("+7", 7), ("2147483647", 2147483647)],
)
def test_parses_integers(raw, expected):
    assert parse_id(raw, "userId") == expected


@pytest.mark.parametrize("raw", [None, "", "abc", "1.5", "10x", "1_0", "١", "1e3"])
def test_rejects_non_numeric(raw):
    with pytest.raises(ValueError, match="Invalid userId"):
        parse_id(raw, "userId")


@pytest.mark.parametrize("raw", ["2147483648", "-2147483649", "99999999999999999999"])
def test_rejects_out_of_range(raw):
    with pytest.raises(ValueError, match="Invalid userId"):
        parse_id(raw, "userId")
