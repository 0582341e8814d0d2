"""
Account Ledger Module

Append-only record of balance-changing events for a single account. Entries
are immutable once appended and the balance of an account always equals the
sum of its ledger amounts.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterator, List, Optional
import uuid

from .currency import Money, Currency
from .errors import CurrencyMismatch


@dataclass(frozen=True)
class LedgerEntry:
    """
    Immutable balance-changing event

    Positive amounts are credits, negative amounts are debits.
    """
    amount: Money
    description: str
    balance_after: Money
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entry_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def is_credit(self) -> bool:
        return self.amount.is_positive()

    @property
    def is_debit(self) -> bool:
        return self.amount.is_negative()


class Ledger:
    """Append-only sequence of LedgerEntry owned by one account"""

    def __init__(self, currency: Currency):
        self.currency = currency
        self._entries: List[LedgerEntry] = []

    def append(self, entry: LedgerEntry) -> LedgerEntry:
        """Append an entry; there is no way to remove or replace one"""
        if entry.amount.currency != self.currency:
            raise CurrencyMismatch(
                f"Ledger in {self.currency.code} cannot record {entry.amount.currency.code}"
            )
        self._entries.append(entry)
        return entry

    def total(self) -> Money:
        """Sum of all entry amounts"""
        total = Money.zero(self.currency)
        for entry in self._entries:
            total = total + entry.amount
        return total

    @property
    def last(self) -> Optional[LedgerEntry]:
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LedgerEntry]:
        return iter(tuple(self._entries))

    def __getitem__(self, index):
        return self._entries[index]
