"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class AccountDoesNotExistError(NotFoundError):
    """Account referenced by a loan operation does not exist."""


class LoanNotFoundError(NotFoundError):
    """Requested loan does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class UnauthorizedError(DomainError):
    """Password or PIN missing, wrong, or not yet set up."""


class PinAlreadyExistsError(UnauthorizedError):
    """A PIN can only be created once per account."""


class InvalidPinError(ValidationError):
    """PIN does not have the required format."""


class InvalidAmountError(ValidationError):
    """Amount fails a bound, granularity or business-rule check."""


class InsufficientBalanceError(DomainError):
    """Balance too low for the requested debit."""


class FundTransferError(DomainError):
    """Transfer request is not allowed, e.g. to the same account."""


class IllegalLoanStateError(DomainError):
    """Loan is not in the status required by the requested transition."""


ACCOUNT_NOT_FOUND = "Account does not exist"
PIN_NOT_CREATED = "PIN has not been created for this account"
PIN_EMPTY = "PIN cannot be empty"
PIN_INVALID = "Invalid PIN"
PIN_FORMAT_INVALID = "PIN must be 4 digits"
PIN_ALREADY_EXISTS = "PIN already created"
PASSWORD_EMPTY = "Password cannot be empty"
PASSWORD_INVALID = "Invalid password"
AMOUNT_NOT_POSITIVE = "Invalid amount"
AMOUNT_NOT_MULTIPLE_OF_100 = "Amount must be in multiples of 100"
AMOUNT_EXCEEDS_LIMIT = "Amount cannot be greater than 100,000"
AMOUNT_TOO_PRECISE = "Amount cannot have more than two decimal places"
BALANCE_INSUFFICIENT = "Insufficient balance"
TRANSFER_SAME_ACCOUNT = "Source and target account cannot be the same"
LOAN_NOT_FOUND = "Loan not found"
LOAN_BALANCE_NOT_POSITIVE = "Account must have positive balance"
LOAN_AMOUNT_EXCEEDS_LIMIT = "Loan amount cannot exceed twice the account balance"
LOAN_DESCRIPTION_EMPTY = "Loan description cannot be empty"
REPAYMENT_EXCEEDS_OUTSTANDING = "Repayment amount exceeds outstanding balance"
REPAYMENT_BALANCE_INSUFFICIENT = "Insufficient balance for loan repayment"


def account_not_found(account_number: str) -> str:
    """Return message for missing account."""
    return f"Account {account_number} not found"


def loan_not_found(loan_id: int) -> str:
    """Return message for missing loan."""
    return f"Loan {loan_id} not found"


def loan_not_in_status(loan_id: int, status: str) -> str:
    """Return message for a loan transition attempted from the wrong status."""
    return f"Loan {loan_id} is not in {status} status"


def duplicate_user_email(email: str) -> str:
    """Return message for an already registered email address."""
    return f"User with email '{email}' already exists"


def amount_must_be_positive(amount: Decimal) -> str:
    """Return message for a zero or negative amount."""
    return f"{AMOUNT_NOT_POSITIVE}: {amount} must be greater than zero"
