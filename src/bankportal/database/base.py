"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from bankportal.domain.entities import (
    Account,
    Loan,
    LoanStatus,
    Transaction,
    TransactionType,
    User,
)


class Database(ABC):
    """Abstract database interface for bankportal.

    Write methods commit immediately when called on their own. Inside
    ``unit_of_work()`` they are staged and committed together when the block
    exits, or discarded if it raises.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def unit_of_work(self) -> AbstractContextManager[None]:
        """Scope a group of writes that must commit or fail together."""
        pass

    # User operations
    @abstractmethod
    def create_user(self, name: str, email: str, password_digest: str) -> User:
        """Create a user."""
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email address."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, account_number: str, user_id: int) -> Account:
        """Create an account with a zero balance and no PIN."""
        pass

    @abstractmethod
    def get_account(self, account_number: str) -> Optional[Account]:
        """Get account by account number."""
        pass

    @abstractmethod
    def account_exists(self, account_number: str) -> bool:
        """Check if an account with the given number exists."""
        pass

    @abstractmethod
    def save_account(self, account: Account) -> Account:
        """Persist balance and PIN digest of an existing account."""
        pass

    # Loan operations
    @abstractmethod
    def create_loan(
        self,
        account_number: str,
        amount: Decimal,
        interest_rate: Decimal,
        repayment_period: int,
        outstanding_balance: Decimal,
        description: str,
        status: LoanStatus,
    ) -> Loan:
        """Create a loan."""
        pass

    @abstractmethod
    def get_loan(self, loan_id: int) -> Optional[Loan]:
        """Get loan by ID."""
        pass

    @abstractmethod
    def list_loans(self, account_number: str) -> list[Loan]:
        """List loans of an account in insertion order."""
        pass

    @abstractmethod
    def save_loan(self, loan: Loan) -> Loan:
        """Persist outstanding balance and status of an existing loan."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        amount: Decimal,
        transaction_type: TransactionType,
        source_account_number: Optional[str] = None,
        target_account_number: Optional[str] = None,
    ) -> Transaction:
        """Append a transaction record."""
        pass

    @abstractmethod
    def list_transactions(self, account_number: str) -> list[Transaction]:
        """List transactions where the account is source or target, newest first."""
        pass
