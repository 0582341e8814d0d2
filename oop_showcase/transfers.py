"""
Transfer Module

Moves money between two accounts by composing withdraw and deposit.

Both legs are checked before either runs. Should the deposit leg fail anyway,
the withdrawn amount is credited back to the source with a reversal entry
and the original error is re-raised, so a failed transfer never loses money.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Union
import logging
import uuid

from .accounts import Account
from .currency import AmountLike, Money
from .errors import InsufficientFunds, InvalidTransfer
from .event_log import EventLog
from .logging_config import log_action

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransferReceipt:
    """Result of a completed transfer"""
    from_account_id: str
    to_account_id: str
    amount: Money
    transfer_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    completed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class TransferService:
    """Coordinates withdraw + deposit across two accounts"""

    def __init__(self, event_log: EventLog):
        self.event_log = event_log

    def transfer(self, from_account: Account, to_account: Account,
                 amount: Union[Money, AmountLike]) -> TransferReceipt:
        """
        Transfer amount from one account to another

        Args:
            from_account: Account to debit
            to_account: Account to credit
            amount: Positive amount in the accounts' currency

        Returns:
            TransferReceipt for the completed transfer

        Raises:
            InvalidTransfer: Same account on both sides, or currencies differ
            InvalidAmount: If amount <= 0
            InsufficientFunds: If the source cannot cover the amount
        """
        if from_account is to_account:
            raise InvalidTransfer(f"Cannot transfer from account {from_account.account_id} to itself")
        if from_account.currency != to_account.currency:
            raise InvalidTransfer(
                f"Cannot transfer {from_account.currency.code} to {to_account.currency.code} account"
            )

        money = from_account.require_positive(amount, "Transfer")
        if not from_account.can_withdraw(money):
            raise InsufficientFunds(from_account.account_id, money, from_account.available_to_withdraw())

        transfer_id = str(uuid.uuid4())
        from_account.withdraw(money, f"Transfer {transfer_id} to {to_account.account_id}")
        try:
            to_account.deposit(money, f"Transfer {transfer_id} from {from_account.account_id}")
        except Exception:
            from_account.deposit(money, f"Reversal of transfer {transfer_id}")
            log_action(
                logger, "error", f"Transfer {transfer_id} reversed after deposit failure",
                action="transfer_reversed", entity_id=transfer_id,
                extra={'from': from_account.account_id, 'to': to_account.account_id, 'amount': str(money)}
            )
            raise

        self.event_log.log(
            f"Transferred {money} from {from_account.account_id} to {to_account.account_id}"
        )
        return TransferReceipt(
            from_account_id=from_account.account_id,
            to_account_id=to_account.account_id,
            amount=money,
            transfer_id=transfer_id
        )
