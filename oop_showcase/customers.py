"""
Customer Module

Users of the system. User is abstract; Owner holds references to bank
accounts, ShopUser (in commerce) places orders.
"""

from abc import abstractmethod
from typing import Iterator, List, Sequence
import logging

from .abstract import AbstractEntity
from .accounts import Account, AccountSummary
from .currency import Currency, Money

logger = logging.getLogger(__name__)


class User(AbstractEntity):
    """Base user with a name and an email/contact address"""

    def __init__(self, name: str, email: str):
        self.name = name
        self.email = email

    @property
    @abstractmethod
    def role(self) -> str:
        """Short label for the kind of user"""

    def details(self) -> str:
        return f"Name: {self.name}, Email: {self.email}"


class AccountSummaries:
    """
    Lazy view over an owner's accounts

    Nothing is computed until iteration, and every iteration starts over
    from the live accounts.
    """

    def __init__(self, accounts: Sequence[Account]):
        self._accounts = accounts

    def __iter__(self) -> Iterator[AccountSummary]:
        for account in self._accounts:
            yield account.summary()

    def __len__(self) -> int:
        return len(self._accounts)


class Owner(User):
    """Bank customer holding account references"""

    role = "account owner"

    def __init__(self, owner_id: str, name: str, contact: str):
        super().__init__(name, contact)
        self.owner_id = owner_id
        self._accounts: List[Account] = []

    @property
    def contact(self) -> str:
        return self.email

    @property
    def accounts(self) -> List[Account]:
        return list(self._accounts)

    def add_account(self, account: Account) -> None:
        """
        Attach an account reference

        The same account may be attached twice; that is reported, not refused.
        """
        if any(existing is account for existing in self._accounts):
            logger.warning(
                "account %s added twice to owner %s", account.account_id, self.owner_id
            )
        self._accounts.append(account)

    def list_accounts(self) -> AccountSummaries:
        return AccountSummaries(self._accounts)

    def total_balance(self, currency: Currency = Currency.USD) -> Money:
        """Sum of balances of the owner's accounts in one currency, each account counted once"""
        total = Money.zero(currency)
        seen = set()
        for account in self._accounts:
            if id(account) in seen or account.currency != currency:
                continue
            seen.add(id(account))
            total = total + account.get_balance()
        return total
