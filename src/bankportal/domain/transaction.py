"""Transaction recorder domain service."""

import logging
from typing import TYPE_CHECKING, Optional
from decimal import Decimal
from bankportal.domain import errors
from bankportal.domain.entities import Transaction as TransactionEntity, TransactionType

if TYPE_CHECKING:
    from bankportal.database.base import Database

logger = logging.getLogger(__name__)


class TransactionService:
    """Append-only ledger of balance-affecting operations."""

    def __init__(self, db: "Database"):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def record(
        self,
        transaction_type: TransactionType,
        amount: Decimal,
        source_account_number: Optional[str] = None,
        target_account_number: Optional[str] = None,
    ) -> TransactionEntity:
        """Append one transaction record.

        Must be called inside the same unit of work as the balance update it
        describes, after that update has been saved.

        Args:
            transaction_type: Kind of operation
            amount: Amount moved
            source_account_number: Account debited, or the depositing account
            target_account_number: Account credited, if any

        Returns:
            The recorded transaction
        """
        if source_account_number is None and target_account_number is None:
            raise errors.ValidationError("Transaction needs a source or target account")

        transaction = self.db.create_transaction(
            amount=amount,
            transaction_type=transaction_type,
            source_account_number=source_account_number,
            target_account_number=target_account_number,
        )
        logger.debug(
            "Recorded %s of %s (source=%s, target=%s)",
            transaction_type.value,
            amount,
            source_account_number,
            target_account_number,
        )
        return transaction

    def list_transactions(self, account_number: str) -> list[TransactionEntity]:
        """List an account's transactions, newest first.

        Raises:
            NotFoundError: If the account does not exist
        """
        if not self.db.account_exists(account_number):
            raise errors.NotFoundError(errors.account_not_found(account_number))
        return self.db.list_transactions(account_number)
