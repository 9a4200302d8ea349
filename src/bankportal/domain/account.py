"""Account domain service."""

import dataclasses
import logging
import uuid
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from bankportal.domain import errors
from bankportal.domain.entities import Account as AccountEntity, TransactionType
from bankportal.domain.transaction import TransactionService
from bankportal.domain.validation import validate_amount, validate_pin_format
from bankportal.utils.secret_hasher import SecretHasher

if TYPE_CHECKING:
    from bankportal.database.base import Database

logger = logging.getLogger(__name__)

ACCOUNT_NUMBER_LENGTH = 6


class AccountService:
    """Service for PIN management and cash movements on accounts.

    Every mutating operation runs in one unit of work: the balance update(s)
    and the transaction record commit together or not at all. Concurrent
    mutation of the same account relies on the storage layer for isolation.
    """

    def __init__(self, db: "Database", hasher: Optional[SecretHasher] = None):
        """Initialize account service.

        Args:
            db: Database instance
            hasher: Secret hasher for passwords and PINs
        """
        self.db = db
        self.hasher = hasher or SecretHasher()
        self.transactions = TransactionService(db)

    def create_account(self, user_id: int) -> AccountEntity:
        """Open a new account for a user.

        Args:
            user_id: Owning user ID

        Returns:
            Account with a fresh account number, zero balance and no PIN

        Raises:
            NotFoundError: If the user does not exist
        """
        if self.db.get_user(user_id) is None:
            raise errors.NotFoundError(f"User {user_id} not found")

        account = self.db.create_account(
            account_number=self._generate_account_number(), user_id=user_id
        )
        logger.info("Opened account %s for user %s", account.account_number, user_id)
        return account

    def get_account(self, account_number: str) -> Optional[AccountEntity]:
        """Get account by account number.

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_number)

    def is_pin_created(self, account_number: str) -> bool:
        """Check if a PIN has been created for the account.

        Raises:
            NotFoundError: If the account does not exist
        """
        return self._require_account(account_number).has_pin

    def create_pin(self, account_number: str, password: str, pin: str) -> None:
        """Create the account PIN. Allowed only once.

        Raises:
            NotFoundError: If the account does not exist
            UnauthorizedError: If the password is empty or wrong
            PinAlreadyExistsError: If a PIN has already been created
            InvalidPinError: If the PIN is empty or not four digits
        """
        with self.db.unit_of_work():
            account = self._require_account(account_number)
            self._verify_password(account, password)

            if account.has_pin:
                raise errors.PinAlreadyExistsError(errors.PIN_ALREADY_EXISTS)

            validate_pin_format(pin)

            self.db.save_account(
                dataclasses.replace(account, pin_digest=self.hasher.encode(pin))
            )
        logger.info("Created PIN for account %s", account_number)

    def update_pin(
        self, account_number: str, old_pin: str, password: str, new_pin: str
    ) -> None:
        """Replace the account PIN.

        The password is checked before the old PIN.

        Raises:
            NotFoundError: If the account does not exist
            UnauthorizedError: If the password or old PIN is wrong
            InvalidPinError: If the new PIN is empty or not four digits
        """
        logger.info("Updating PIN for account %s", account_number)
        with self.db.unit_of_work():
            account = self._require_account(account_number)
            self._verify_password(account, password)
            self._verify_pin(account, old_pin)
            validate_pin_format(new_pin)

            self.db.save_account(
                dataclasses.replace(account, pin_digest=self.hasher.encode(new_pin))
            )

    def cash_deposit(self, account_number: str, pin: str, amount: Decimal) -> AccountEntity:
        """Deposit cash into an account.

        Returns:
            The updated account

        Raises:
            NotFoundError: If the account does not exist
            UnauthorizedError: If the PIN is missing or wrong
            InvalidAmountError: If the amount is out of bounds
        """
        with self.db.unit_of_work():
            account = self._require_account(account_number)
            self._verify_pin(account, pin)
            validate_amount(amount)

            updated = self.db.save_account(
                dataclasses.replace(account, balance=account.balance + amount)
            )
            self.transactions.record(
                TransactionType.CASH_DEPOSIT, amount, source_account_number=account_number
            )
        logger.info("Deposited %s into account %s", amount, account_number)
        return updated

    def cash_withdrawal(self, account_number: str, pin: str, amount: Decimal) -> AccountEntity:
        """Withdraw cash from an account.

        Returns:
            The updated account

        Raises:
            NotFoundError: If the account does not exist
            UnauthorizedError: If the PIN is missing or wrong
            InvalidAmountError: If the amount is out of bounds
            InsufficientBalanceError: If the balance is lower than the amount
        """
        with self.db.unit_of_work():
            account = self._require_account(account_number)
            self._verify_pin(account, pin)
            validate_amount(amount)

            if account.balance < amount:
                raise errors.InsufficientBalanceError(errors.BALANCE_INSUFFICIENT)

            updated = self.db.save_account(
                dataclasses.replace(account, balance=account.balance - amount)
            )
            self.transactions.record(
                TransactionType.CASH_WITHDRAWAL, amount, source_account_number=account_number
            )
        logger.info("Withdrew %s from account %s", amount, account_number)
        return updated

    def fund_transfer(
        self,
        source_account_number: str,
        target_account_number: str,
        pin: str,
        amount: Decimal,
    ) -> tuple[AccountEntity, AccountEntity]:
        """Move funds between two accounts.

        Debit, credit and the transaction record commit together.

        Returns:
            Updated (source, target) accounts

        Raises:
            NotFoundError: If the source or target account does not exist
            UnauthorizedError: If the source PIN is missing or wrong
            InvalidAmountError: If the amount is out of bounds
            FundTransferError: If source and target are the same account
            InsufficientBalanceError: If the source balance is lower than the amount
        """
        with self.db.unit_of_work():
            source = self._require_account(source_account_number)
            self._verify_pin(source, pin)
            validate_amount(amount)

            if source_account_number == target_account_number:
                raise errors.FundTransferError(errors.TRANSFER_SAME_ACCOUNT)

            target = self._require_account(target_account_number)

            if source.balance < amount:
                raise errors.InsufficientBalanceError(errors.BALANCE_INSUFFICIENT)

            updated_source = self.db.save_account(
                dataclasses.replace(source, balance=source.balance - amount)
            )
            updated_target = self.db.save_account(
                dataclasses.replace(target, balance=target.balance + amount)
            )
            self.transactions.record(
                TransactionType.CASH_TRANSFER,
                amount,
                source_account_number=source_account_number,
                target_account_number=target_account_number,
            )
        logger.info(
            "Transferred %s from account %s to account %s",
            amount,
            source_account_number,
            target_account_number,
        )
        return updated_source, updated_target

    def _require_account(self, account_number: str) -> AccountEntity:
        account = self.db.get_account(account_number)
        if account is None:
            raise errors.NotFoundError(errors.ACCOUNT_NOT_FOUND)
        return account

    def _verify_password(self, account: AccountEntity, password: Optional[str]) -> None:
        if not password:
            raise errors.UnauthorizedError(errors.PASSWORD_EMPTY)

        user = self.db.get_user(account.user_id)
        if user is None or not self.hasher.verify(password, user.password_digest):
            raise errors.UnauthorizedError(errors.PASSWORD_INVALID)

    def _verify_pin(self, account: AccountEntity, pin: Optional[str]) -> None:
        if not account.has_pin:
            raise errors.UnauthorizedError(errors.PIN_NOT_CREATED)

        if not pin:
            raise errors.UnauthorizedError(errors.PIN_EMPTY)

        if not self.hasher.verify(pin, account.pin_digest):
            raise errors.UnauthorizedError(errors.PIN_INVALID)

    def _generate_account_number(self) -> str:
        # Numbers are never reused: retry until one is unused
        while True:
            account_number = uuid.uuid4().hex[:ACCOUNT_NUMBER_LENGTH]
            if not self.db.account_exists(account_number):
                return account_number
