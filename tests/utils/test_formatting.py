"""Tests for optional-digit price formatting."""

from decimal import Decimal

import pytest

from delegates_app.utils.formatting import format_optional_digits, format_price


class TestFormatOptionalDigits:
    """Test rounding and trimming rules."""

    @pytest.mark.parametrize("value, expected", [
        (Decimal("71.90") / 3, "23.97"),
        (Decimal("24"), "24"),
        (Decimal("24.10"), "24.1"),
        (Decimal("0.5"), ".5"),
        (Decimal("0"), ""),
        (Decimal("1.005"), "1.01"),
        (Decimal("-2.345"), "-2.35"),
        (Decimal("129.95"), "129.95"),
    ])
    def test_two_places(self, value, expected):
        assert format_optional_digits(value) == expected

    def test_zero_places(self):
        assert format_optional_digits(Decimal("23.5"), places=0) == "24"

    def test_three_places(self):
        assert format_optional_digits(Decimal("71.90") / 3, places=3) == "23.967"


class TestFormatPrice:
    """Test currency prefixing."""

    def test_default_currency(self):
        assert format_price(Decimal("23.9666")) == "$23.97"

    def test_custom_currency(self):
        assert format_price(Decimal("5"), currency_symbol="EUR ") == "EUR 5"
