"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from pos.domain.exceptions import InvalidAmount, ValidationError
from pos.domain.model.value_objects import Money, Percent, Quantity, TaxRate


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation_from_cents(self):
        m = Money(1050)
        assert m.cents == 1050
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").cents == 2599

    def test_of_factory_from_int(self):
        assert Money.of(10) == Money(1000)

    def test_of_rejects_fractions_of_a_cent(self):
        with pytest.raises(InvalidAmount, match="more than 2 decimal places"):
            Money.of("40.755")

    def test_of_accepts_trailing_zeros(self):
        assert Money.of("3.7000") == Money.of("3.70")

    def test_from_decimal_keeps_scale(self):
        assert str(Money.from_decimal(Decimal("40.755"))) == "$40.76"

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidAmount, match="cannot be negative"):
            Money(-1)

    def test_negative_string_rejected(self):
        with pytest.raises(InvalidAmount, match="cannot be negative"):
            Money.of("-0.01")

    def test_unparseable_rejected(self):
        with pytest.raises(InvalidAmount, match="Invalid money amount"):
            Money.of("ten dollars")

    def test_nan_rejected(self):
        with pytest.raises(InvalidAmount):
            Money.of("NaN")

    def test_float_rejected(self):
        with pytest.raises(InvalidAmount, match="decimal string or integer"):
            Money.of(10.5)

    def test_invalid_amount_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            Money.of("abc")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction(self):
        assert Money.of("10") - Money.of("3") == Money.of("7")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(InvalidAmount, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiply_by_int(self):
        assert Money.of("7.50").multiply(3) == Money.of("22.50")

    def test_multiply_rounds_half_up(self):
        assert Money.of("0.05").multiply(Decimal("0.5")) == Money.of("0.03")

    def test_percent(self):
        assert Money.of("39.00").percent(Percent.of("5")) == Money.of("1.95")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(InvalidAmount, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(InvalidAmount, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidAmount, match="must be an integer"):
            Quantity(1.5)

    def test_str(self):
        assert str(Quantity(7)) == "7"


# ── Percent / TaxRate ────────────────────────────────────────────────────────


class TestPercent:

    def test_fraction(self):
        assert Percent.of("10").fraction == Decimal("0.1")

    def test_bounds_inclusive(self):
        assert Percent.of("0").is_zero
        assert Percent.of("100").value == Decimal("100")

    def test_above_hundred_rejected(self):
        with pytest.raises(InvalidAmount, match="between 0 and 100"):
            Percent.of("100.01")

    def test_negative_rejected(self):
        with pytest.raises(InvalidAmount, match="between 0 and 100"):
            Percent.of("-5")

    def test_str(self):
        assert str(Percent.of("12.50")) == "12.5%"


class TestTaxRate:

    def test_fraction_accepted(self):
        assert TaxRate.of("0.10").value == Decimal("0.10")

    def test_percentage_style_value_rejected(self):
        with pytest.raises(InvalidAmount, match="fraction between 0 and 1"):
            TaxRate.of("10")

    def test_str(self):
        assert str(TaxRate.of("0.10")) == "10%"
