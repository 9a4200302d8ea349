"""Domain model entities for bankportal.

These are pure data classes representing business concepts, independent of
database schema. Services never mutate them in place: a changed balance or
status is expressed by deriving a new entity with ``dataclasses.replace`` and
handing it back to the store.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class LoanStatus(str, Enum):
    """Lifecycle states of a loan."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REPAID = "REPAID"


class TransactionType(str, Enum):
    """Kinds of balance-affecting operations recorded in the ledger."""

    CASH_DEPOSIT = "CASH_DEPOSIT"
    CASH_WITHDRAWAL = "CASH_WITHDRAWAL"
    CASH_TRANSFER = "CASH_TRANSFER"
    LOAN_DISBURSEMENT = "LOAN_DISBURSEMENT"
    LOAN_REPAYMENT = "LOAN_REPAYMENT"


@dataclass(frozen=True)
class User:
    """Account holder domain entity."""

    id: int
    name: str
    email: str
    password_digest: str
    created_at: datetime


@dataclass(frozen=True)
class Account:
    """Bank account domain entity."""

    id: int
    account_number: str
    balance: Decimal
    pin_digest: Optional[str]
    user_id: int
    created_at: datetime

    @property
    def has_pin(self) -> bool:
        return self.pin_digest is not None


@dataclass(frozen=True)
class Loan:
    """Loan domain entity."""

    id: int
    account_number: str
    amount: Decimal
    interest_rate: Decimal
    repayment_period: int
    outstanding_balance: Decimal
    description: str
    status: LoanStatus
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Ledger entry domain entity. Never updated once created."""

    id: int
    amount: Decimal
    transaction_type: TransactionType
    transaction_date: datetime
    source_account_number: Optional[str]
    target_account_number: Optional[str]
