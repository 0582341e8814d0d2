"""
Account Module

Closed family of bank accounts. Each variant holds a Money balance and owns
its ledger; the base Account cannot be constructed directly. Every variant
defines a floor, the lowest balance a withdrawal may leave behind:

- standard and interest accounts: zero
- overdraft accounts: minus the overdraft limit

Deposits and withdrawals validate before they mutate, so a failed operation
leaves balance and ledger untouched.
"""

from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional, Union
import logging

from .abstract import AbstractEntity
from .currency import AmountLike, Currency, Money, to_decimal
from .errors import CurrencyMismatch, InsufficientFunds, InvalidAmount
from .event_log import EventLog
from .ledger import Ledger, LedgerEntry

logger = logging.getLogger(__name__)


class AccountVariant(Enum):
    """Account kinds understood by the factory"""
    STANDARD = "standard"    # No interest, no overdraft
    INTEREST = "interest"    # Pays interest on demand, floor of zero
    OVERDRAFT = "overdraft"  # May go negative down to its limit


@dataclass(frozen=True)
class AccountSummary:
    """Point-in-time view of an account"""
    account_id: str
    variant: AccountVariant
    balance: Money

    def __str__(self) -> str:
        return f"Account: {self.account_id}, Balance: {self.balance}"


class Account(AbstractEntity):
    """
    Base bank account

    Subclasses supply the variant tag and the floor.
    """

    variant: AccountVariant

    def __init__(
        self,
        account_id: str,
        event_log: EventLog,
        opening_balance: Union[Money, AmountLike] = 0,
        *,
        currency: Currency = Currency.USD
    ):
        if not account_id:
            raise ValueError("Account id must not be empty")

        self.account_id = account_id
        self.currency = currency
        self.event_log = event_log
        self.created_at = datetime.now(timezone.utc)
        self._ledger = Ledger(currency)
        self._balance = Money.zero(currency)

        opening = self._to_money(opening_balance)
        if opening.is_negative():
            raise InvalidAmount(
                f"Opening balance cannot be negative: {opening.to_string()}"
            )
        if opening.is_positive():
            self._post(opening, "Opening balance")

    @property
    @abstractmethod
    def floor(self) -> Money:
        """Lowest balance a withdrawal may leave"""

    @property
    def balance(self) -> Money:
        return self._balance

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    def get_balance(self) -> Money:
        """Current balance, no side effects"""
        return self._balance

    def available_to_withdraw(self) -> Money:
        """Amount that can be withdrawn before hitting the floor"""
        return self._balance - self.floor

    def can_withdraw(self, amount: Union[Money, AmountLike]) -> bool:
        money = self._to_money(amount)
        return money.is_positive() and money <= self.available_to_withdraw()

    def deposit(self, amount: Union[Money, AmountLike], description: Optional[str] = None) -> LedgerEntry:
        """
        Credit the account

        Args:
            amount: Positive amount in the account currency
            description: Ledger text, defaults to "Deposited <amount>"

        Returns:
            The appended LedgerEntry

        Raises:
            InvalidAmount: If amount <= 0
            CurrencyMismatch: If amount is Money in another currency
        """
        money = self.require_positive(amount, "Deposit")
        entry = self._post(money, description or f"Deposited {money}")
        self.event_log.log(f"Deposit of {money} made to account {self.account_id}")
        return entry

    def withdraw(self, amount: Union[Money, AmountLike], description: Optional[str] = None) -> LedgerEntry:
        """
        Debit the account

        Raises:
            InvalidAmount: If amount <= 0
            InsufficientFunds: If the balance would drop below the floor
        """
        money = self.require_positive(amount, "Withdrawal")
        if money > self.available_to_withdraw():
            logger.info(
                "withdrawal rejected",
                extra={'action': 'withdraw', 'entity_id': self.account_id,
                       'extra': {'requested': str(money), 'available': str(self.available_to_withdraw())}}
            )
            raise InsufficientFunds(self.account_id, money, self.available_to_withdraw())
        entry = self._post(-money, description or f"Withdrew {money}")
        self.event_log.log(f"Withdrawal of {money} from account {self.account_id}")
        return entry

    def summary(self) -> AccountSummary:
        return AccountSummary(self.account_id, self.variant, self._balance)

    def _post(self, amount: Money, description: str) -> LedgerEntry:
        """Apply a signed amount and record it; callers validate first"""
        self._balance = self._balance + amount
        return self._ledger.append(LedgerEntry(
            amount=amount,
            description=description,
            balance_after=self._balance
        ))

    def _to_money(self, amount: Union[Money, AmountLike]) -> Money:
        if isinstance(amount, Money):
            if amount.currency != self.currency:
                raise CurrencyMismatch(
                    f"Account {self.account_id} holds {self.currency.code}, "
                    f"got {amount.currency.code}"
                )
            return amount
        return Money(to_decimal(amount), self.currency)

    def require_positive(self, amount: Union[Money, AmountLike], operation: str) -> Money:
        money = self._to_money(amount)
        if not money.is_positive():
            raise InvalidAmount(f"{operation} amount must be greater than zero.")
        return money

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.account_id!r}, balance={self._balance.to_string()!r})"


class StandardAccount(Account):
    """Plain account that cannot go below zero"""

    variant = AccountVariant.STANDARD

    @property
    def floor(self) -> Money:
        return Money.zero(self.currency)


class InterestAccount(Account):
    """Savings account paying interest at a percentage rate"""

    variant = AccountVariant.INTEREST

    def __init__(
        self,
        account_id: str,
        event_log: EventLog,
        opening_balance: Union[Money, AmountLike] = 0,
        interest_rate: AmountLike = 0,
        *,
        currency: Currency = Currency.USD
    ):
        rate = to_decimal(interest_rate)
        if rate < 0:
            raise InvalidAmount(f"Interest rate cannot be negative: {rate}")
        super().__init__(account_id, event_log, opening_balance, currency=currency)
        self.interest_rate = rate

    @property
    def floor(self) -> Money:
        return Money.zero(self.currency)

    def apply_interest(self) -> Money:
        """
        Credit balance * rate / 100 through the regular deposit path

        Returns:
            The interest credited; zero when there is nothing to pay
        """
        interest = self._balance * (self.interest_rate / Decimal('100'))
        if not interest.is_positive():
            self.event_log.log(f"No interest applied to savings account {self.account_id}")
            return Money.zero(self.currency)

        self.deposit(interest, f"Interest at {self.interest_rate}%")
        self.event_log.log(
            f"Interest of {interest} applied to savings account {self.account_id}"
        )
        return interest


class OverdraftAccount(Account):
    """Current account allowed to go negative down to its overdraft limit"""

    variant = AccountVariant.OVERDRAFT

    def __init__(
        self,
        account_id: str,
        event_log: EventLog,
        opening_balance: Union[Money, AmountLike] = 0,
        overdraft_limit: Union[Money, AmountLike] = 0,
        *,
        currency: Currency = Currency.USD
    ):
        super().__init__(account_id, event_log, opening_balance, currency=currency)
        limit = self._to_money(overdraft_limit)
        if limit.is_negative():
            raise InvalidAmount(f"Overdraft limit cannot be negative: {limit.to_string()}")
        self.overdraft_limit = limit

    @property
    def floor(self) -> Money:
        return -self.overdraft_limit

    @property
    def is_overdrawn(self) -> bool:
        return self._balance.is_negative()

    def available_to_withdraw(self) -> Money:
        """
        Headroom down to minus the limit

        An overdrawn account accepts no further withdrawals until deposits
        bring it back to zero or above.
        """
        if self.is_overdrawn:
            return Money.zero(self.currency)
        return super().available_to_withdraw()
