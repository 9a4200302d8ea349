"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the services only ever see
frozen domain entities and never hold on to live ORM rows.
"""

from bankportal.domain import entities as domain
from bankportal.database.models import (
    User as ORMUser,
    Account as ORMAccount,
    Loan as ORMLoan,
    Transaction as ORMTransaction,
)


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        id=orm_user.id,
        name=orm_user.name,
        email=orm_user.email,
        password_digest=orm_user.password_digest,
        created_at=orm_user.created_at,
    )


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        account_number=orm_account.account_number,
        balance=orm_account.balance,
        pin_digest=orm_account.pin_digest,
        user_id=orm_account.user_id,
        created_at=orm_account.created_at,
    )


def loan_to_domain(orm_loan: ORMLoan) -> domain.Loan:
    """Convert SQLAlchemy Loan model to domain Loan entity."""
    return domain.Loan(
        id=orm_loan.id,
        account_number=orm_loan.account_number,
        amount=orm_loan.amount,
        interest_rate=orm_loan.interest_rate,
        repayment_period=orm_loan.repayment_period,
        outstanding_balance=orm_loan.outstanding_balance,
        description=orm_loan.description,
        status=orm_loan.status,
        created_at=orm_loan.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        amount=orm_transaction.amount,
        transaction_type=orm_transaction.transaction_type,
        transaction_date=orm_transaction.transaction_date,
        source_account_number=orm_transaction.source_account_number,
        target_account_number=orm_transaction.target_account_number,
    )
