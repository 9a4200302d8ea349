"""Loan domain service.

Loans move through ``PENDING -> APPROVED -> REPAID``. Approval disburses the
principal into the account; the borrower then repays principal plus the fixed
interest. Only approval and repayment touch the account balance, and each of
them records exactly one transaction in the same unit of work.
"""

import dataclasses
import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Optional
from bankportal.domain import errors
from bankportal.domain.entities import (
    Account as AccountEntity,
    Loan as LoanEntity,
    LoanStatus,
    TransactionType,
)
from bankportal.domain.transaction import TransactionService
from bankportal.domain.validation import CENT, validate_cents

if TYPE_CHECKING:
    from bankportal.database.base import Database

logger = logging.getLogger(__name__)

INTEREST_RATE = Decimal("5.0")
REPAYMENT_PERIOD_MONTHS = 12
MAX_LOAN_TO_BALANCE_RATIO = 2


def outstanding_for(amount: Decimal, interest_rate: Decimal = INTEREST_RATE) -> Decimal:
    """Return principal plus interest, rounded to cents."""
    return (amount * (1 + interest_rate / 100)).quantize(CENT, rounding=ROUND_HALF_UP)


class LoanService:
    """Service for the loan lifecycle."""

    def __init__(self, db: "Database"):
        """Initialize loan service.

        Args:
            db: Database instance
        """
        self.db = db
        self.transactions = TransactionService(db)

    def apply_for_loan(self, account_number: str, amount: Decimal, description: str) -> LoanEntity:
        """Apply for a loan against an account.

        No money moves until the loan is approved.

        Args:
            account_number: Borrowing account
            amount: Requested principal
            description: Purpose of the loan

        Returns:
            The pending loan

        Raises:
            AccountDoesNotExistError: If the account does not exist
            InsufficientBalanceError: If the account balance is not positive
            InvalidAmountError: If the amount is not positive, is finer than one
                cent or exceeds twice the account balance
            ValidationError: If the description is empty
        """
        account = self.db.get_account(account_number)
        if account is None:
            raise errors.AccountDoesNotExistError(errors.ACCOUNT_NOT_FOUND)

        if account.balance <= 0:
            raise errors.InsufficientBalanceError(errors.LOAN_BALANCE_NOT_POSITIVE)

        if amount <= 0:
            raise errors.InvalidAmountError(errors.amount_must_be_positive(amount))
        validate_cents(amount)

        if amount > account.balance * MAX_LOAN_TO_BALANCE_RATIO:
            raise errors.InvalidAmountError(errors.LOAN_AMOUNT_EXCEEDS_LIMIT)

        if not description or not description.strip():
            raise errors.ValidationError(errors.LOAN_DESCRIPTION_EMPTY)

        loan = self.db.create_loan(
            account_number=account_number,
            amount=amount,
            interest_rate=INTEREST_RATE,
            repayment_period=REPAYMENT_PERIOD_MONTHS,
            outstanding_balance=outstanding_for(amount),
            description=description.strip(),
            status=LoanStatus.PENDING,
        )
        logger.info("Loan %s of %s applied for by account %s", loan.id, amount, account_number)
        return loan

    def approve_loan(self, loan_id: int) -> LoanEntity:
        """Approve a pending loan and disburse its principal.

        Raises:
            LoanNotFoundError: If the loan does not exist
            IllegalLoanStateError: If the loan is not pending
        """
        with self.db.unit_of_work():
            loan = self._require_loan(loan_id)
            if loan.status != LoanStatus.PENDING:
                raise errors.IllegalLoanStateError(
                    errors.loan_not_in_status(loan_id, LoanStatus.PENDING.value)
                )

            account = self._require_account(loan.account_number)
            self.db.save_account(
                dataclasses.replace(account, balance=account.balance + loan.amount)
            )
            self.transactions.record(
                TransactionType.LOAN_DISBURSEMENT,
                loan.amount,
                target_account_number=loan.account_number,
            )
            approved = self.db.save_loan(dataclasses.replace(loan, status=LoanStatus.APPROVED))
        logger.info("Loan %s approved, disbursed %s", loan_id, loan.amount)
        return approved

    def repay_loan(self, loan_id: int, amount: Decimal) -> LoanEntity:
        """Repay part or all of an approved loan from the account balance.

        The loan becomes REPAID when its outstanding balance reaches zero.

        Raises:
            LoanNotFoundError: If the loan does not exist
            IllegalLoanStateError: If the loan is not approved
            InvalidAmountError: If the amount is not positive, is finer than one
                cent or exceeds the outstanding balance
            InsufficientBalanceError: If the account balance is lower than the amount
        """
        with self.db.unit_of_work():
            loan = self._require_loan(loan_id)
            if loan.status != LoanStatus.APPROVED:
                raise errors.IllegalLoanStateError(
                    errors.loan_not_in_status(loan_id, LoanStatus.APPROVED.value)
                )

            if amount <= 0:
                raise errors.InvalidAmountError(errors.amount_must_be_positive(amount))
            validate_cents(amount)

            if amount > loan.outstanding_balance:
                raise errors.InvalidAmountError(errors.REPAYMENT_EXCEEDS_OUTSTANDING)

            account = self._require_account(loan.account_number)
            if account.balance < amount:
                raise errors.InsufficientBalanceError(errors.REPAYMENT_BALANCE_INSUFFICIENT)

            outstanding = loan.outstanding_balance - amount
            status = LoanStatus.REPAID if outstanding == 0 else LoanStatus.APPROVED

            self.db.save_account(dataclasses.replace(account, balance=account.balance - amount))
            self.transactions.record(
                TransactionType.LOAN_REPAYMENT,
                amount,
                source_account_number=loan.account_number,
            )
            repaid = self.db.save_loan(
                dataclasses.replace(loan, outstanding_balance=outstanding, status=status)
            )
        logger.info("Loan %s repaid %s, outstanding %s", loan_id, amount, outstanding)
        return repaid

    def get_loan(self, loan_id: int) -> Optional[LoanEntity]:
        """Get loan by ID.

        Returns:
            Loan entity or None if not found
        """
        return self.db.get_loan(loan_id)

    def get_loans_by_account_number(self, account_number: str) -> list[LoanEntity]:
        """List all loans of an account.

        Raises:
            AccountDoesNotExistError: If the account does not exist
        """
        if not self.db.account_exists(account_number):
            raise errors.AccountDoesNotExistError(errors.ACCOUNT_NOT_FOUND)
        return self.db.list_loans(account_number)

    def _require_loan(self, loan_id: int) -> LoanEntity:
        loan = self.db.get_loan(loan_id)
        if loan is None:
            raise errors.LoanNotFoundError(errors.LOAN_NOT_FOUND)
        return loan

    def _require_account(self, account_number: str) -> AccountEntity:
        account = self.db.get_account(account_number)
        if account is None:
            raise errors.AccountDoesNotExistError(errors.ACCOUNT_NOT_FOUND)
        return account
