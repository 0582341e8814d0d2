"""
Variant Factories

A VariantFactory maps a closed set of tags to builders. AccountFactory is the
banking instance: it turns "standard", "interest" or "overdraft" into the
matching Account subclass bound to the run's EventLog.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union
import logging

from .accounts import (
    Account, AccountVariant, InterestAccount, OverdraftAccount, StandardAccount
)
from .currency import Currency
from .errors import UnknownVariant
from .event_log import EventLog

logger = logging.getLogger(__name__)

Tag = Union[str, Enum]


class VariantFactory:
    """
    Registry of tag -> builder

    Tags are matched case-insensitively; Enum members are matched on their value.
    """

    kind = "variant"

    def __init__(self):
        self._builders: Dict[str, Callable[..., Any]] = {}
        self._aliases: Dict[str, str] = {}

    def _register(self, tag: str, builder: Callable[..., Any], aliases: tuple = ()) -> None:
        key = tag.lower()
        self._builders[key] = builder
        for alias in aliases:
            self._aliases[alias.lower()] = key

    def resolve_tag(self, tag: Tag) -> str:
        """
        Normalize a tag to its canonical key

        Raises:
            UnknownVariant: If the tag is not registered
        """
        raw = tag.value if isinstance(tag, Enum) else tag
        if not isinstance(raw, str):
            raise UnknownVariant(tag, self.known_variants(), self.kind)

        key = raw.strip().lower()
        key = self._aliases.get(key, key)
        if key not in self._builders:
            raise UnknownVariant(tag, self.known_variants(), self.kind)
        return key

    def known_variants(self) -> List[str]:
        return sorted(self._builders)

    def build(self, tag: Tag, *args, **kwargs) -> Any:
        key = self.resolve_tag(tag)
        return self._builders[key](*args, **kwargs)


class AccountFactory(VariantFactory):
    """Creates typed accounts from a variant tag"""

    kind = "account variant"

    # Positional parameters each variant accepts, in order
    PARAMS = {
        AccountVariant.STANDARD.value: ("account_id", "opening_balance"),
        AccountVariant.INTEREST.value: ("account_id", "opening_balance", "interest_rate"),
        AccountVariant.OVERDRAFT.value: ("account_id", "opening_balance", "overdraft_limit"),
    }

    def __init__(self, event_log: EventLog, currency: Currency = Currency.USD):
        super().__init__()
        self.event_log = event_log
        self.currency = currency

        self._register(AccountVariant.STANDARD.value, StandardAccount)
        self._register(AccountVariant.INTEREST.value, InterestAccount, aliases=("savings",))
        self._register(AccountVariant.OVERDRAFT.value, OverdraftAccount, aliases=("current",))

    def create(self, variant: Tag, *params, currency: Optional[Currency] = None, **kwargs) -> Account:
        """
        Create an account of the given variant

        Args:
            variant: "standard", "interest" (alias "savings"), "overdraft"
                (alias "current") or an AccountVariant member
            *params: Account id, opening balance, then the variant parameter
                (interest rate in percent, or overdraft limit)
            currency: Overrides the factory's default currency

        Returns:
            The new Account

        Raises:
            UnknownVariant: If the variant tag is not recognised
            TypeError: If the account id is missing or too many params are given
        """
        key = self.resolve_tag(variant)
        names = self.PARAMS[key]
        if not params:
            raise TypeError(f"{key} account requires an account_id")
        if len(params) > len(names):
            raise TypeError(
                f"{key} account takes at most {len(names)} parameters "
                f"({', '.join(names)}), got {len(params)}"
            )

        account = self._builders[key](
            params[0], self.event_log, *params[1:],
            currency=currency or self.currency, **kwargs
        )
        logger.info(
            "account created",
            extra={'action': 'create_account', 'entity_id': account.account_id,
                   'extra': {'variant': account.variant.value}}
        )
        self.event_log.log(f"Created {account.variant.value} account {account.account_id}")
        return account
