"""
Test suite for ledger module

Tests immutable ledger entries and the append-only ledger.
"""

import pytest
from dataclasses import FrozenInstanceError
from decimal import Decimal

from oop_showcase.currency import Money, Currency
from oop_showcase.errors import CurrencyMismatch
from oop_showcase.ledger import Ledger, LedgerEntry


def usd(amount) -> Money:
    return Money(Decimal(str(amount)), Currency.USD)


class TestLedgerEntry:
    """Test individual ledger entries"""

    def test_credit_entry(self):
        entry = LedgerEntry(amount=usd(100), description="Deposited 100.00", balance_after=usd(100))

        assert entry.is_credit
        assert not entry.is_debit
        assert entry.timestamp.tzinfo is not None
        assert len(entry.entry_id) > 0

    def test_debit_entry(self):
        entry = LedgerEntry(amount=usd(-40), description="Withdrew 40.00", balance_after=usd(60))

        assert entry.is_debit
        assert not entry.is_credit

    def test_entry_is_immutable(self):
        entry = LedgerEntry(amount=usd(1), description="x", balance_after=usd(1))
        with pytest.raises(FrozenInstanceError):
            entry.amount = usd(2)


class TestLedger:
    """Test the append-only ledger"""

    def setup_method(self):
        """Set up test fixtures"""
        self.ledger = Ledger(Currency.USD)

    def test_empty_ledger(self):
        assert len(self.ledger) == 0
        assert self.ledger.total() == usd(0)
        assert self.ledger.last is None

    def test_append_and_total(self):
        self.ledger.append(LedgerEntry(amount=usd(100), description="in", balance_after=usd(100)))
        self.ledger.append(LedgerEntry(amount=usd(-30), description="out", balance_after=usd(70)))

        assert len(self.ledger) == 2
        assert self.ledger.total() == usd(70)
        assert self.ledger[0].description == "in"
        assert self.ledger.last.description == "out"
        assert [e.description for e in self.ledger] == ["in", "out"]

    def test_rejects_other_currency(self):
        entry = LedgerEntry(
            amount=Money(Decimal('5'), Currency.EUR),
            description="eur",
            balance_after=Money(Decimal('5'), Currency.EUR)
        )
        with pytest.raises(CurrencyMismatch):
            self.ledger.append(entry)
        assert len(self.ledger) == 0

    def test_no_removal_api(self):
        assert not hasattr(self.ledger, "remove")
        assert not hasattr(self.ledger, "pop")
        with pytest.raises(TypeError):
            del self.ledger[0]
