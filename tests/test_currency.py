"""
Test suite for currency module

Tests Money class and Decimal conversion.
All monetary calculations must use Decimal precision.
"""

import pytest
from decimal import Decimal

from oop_showcase.currency import Money, Currency, to_decimal
from oop_showcase.errors import CurrencyMismatch, InvalidAmount


class TestMoney:
    """Test Money class operations"""

    def test_money_creation(self):
        """Test Money object creation and rounding"""
        money = Money(Decimal('100.50'), Currency.USD)
        assert money.amount == Decimal('100.50')
        assert money.currency == Currency.USD

        # Rounded half up to currency precision
        assert Money(Decimal('100.555'), Currency.USD).amount == Decimal('100.56')
        assert Money(Decimal('100.7'), Currency.JPY).amount == Decimal('101')

    def test_non_decimal_input_is_converted(self):
        assert Money(5000, Currency.USD).amount == Decimal('5000.00')
        assert Money('2.5', Currency.USD).amount == Decimal('2.50')
        assert Money(0.1, Currency.USD).amount == Decimal('0.10')

    def test_money_arithmetic(self):
        """Test Money arithmetic operations"""
        money1 = Money(Decimal('100.50'), Currency.USD)
        money2 = Money(Decimal('50.25'), Currency.USD)

        assert (money1 + money2).amount == Decimal('150.75')
        assert (money1 - money2).amount == Decimal('50.25')
        assert (money1 * Decimal('2')).amount == Decimal('201.00')
        assert (money1 / Decimal('2')).amount == Decimal('50.25')
        assert (-money1).amount == Decimal('-100.50')
        assert abs(-money1) == money1

    def test_currency_mismatch(self):
        """Mixed currencies are refused"""
        usd = Money(Decimal('100'), Currency.USD)
        eur = Money(Decimal('100'), Currency.EUR)

        with pytest.raises(CurrencyMismatch, match="Cannot add USD and EUR"):
            usd + eur
        with pytest.raises(CurrencyMismatch):
            usd - eur
        with pytest.raises(CurrencyMismatch):
            usd < eur

    def test_mismatch_is_a_value_error(self):
        with pytest.raises(ValueError):
            Money(Decimal('1'), Currency.USD) + Money(Decimal('1'), Currency.GBP)

    def test_comparisons_and_predicates(self):
        small = Money(Decimal('10'), Currency.USD)
        large = Money(Decimal('20'), Currency.USD)

        assert small < large
        assert small <= large
        assert large > small
        assert large >= small
        assert small == Money(Decimal('10.00'), Currency.USD)
        assert small != Money(Decimal('10'), Currency.EUR)

        assert Money.zero(Currency.USD).is_zero()
        assert small.is_positive()
        assert (-small).is_negative()

    def test_formatting(self):
        assert Money(Decimal('1234.5'), Currency.USD).to_string() == "USD 1,234.50"
        assert Money(Decimal('1234'), Currency.JPY).to_string() == "JPY 1,234"
        assert str(Money(Decimal('7175'), Currency.USD)) == "7175.00"


class TestToDecimal:
    """Test conversion of user input to Decimal"""

    def test_valid_inputs(self):
        assert to_decimal(Decimal('1.5')) == Decimal('1.5')
        assert to_decimal(3) == Decimal('3')
        assert to_decimal(" 2.75 ") == Decimal('2.75')
        assert to_decimal(2.5) == Decimal('2.5')

    def test_invalid_inputs(self):
        with pytest.raises(InvalidAmount):
            to_decimal("abc")
        with pytest.raises(InvalidAmount):
            to_decimal(True)
        with pytest.raises(InvalidAmount):
            to_decimal("NaN")
        with pytest.raises(InvalidAmount):
            to_decimal(float("inf"))
