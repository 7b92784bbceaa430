import pytest

from app.utils.money import format_price


def test_format_whole_dollars():
    assert format_price(17500) == "$175.00"


def test_format_zero():
    assert format_price(0) == "$0.00"


def test_format_cents_and_thousands():
    assert format_price(5) == "$0.05"
    assert format_price(123456789, "usd") == "$1,234,567.89"


def test_format_other_currencies():
    assert format_price(1000, "EUR") == "€10.00"
    assert format_price(1000, "SEK") == "10.00 SEK"


def test_negative_price_rejected():
    with pytest.raises(ValueError):
        format_price(-1)
