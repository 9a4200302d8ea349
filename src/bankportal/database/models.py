"""SQLAlchemy models for bankportal database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    Enum,
    CheckConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

from bankportal.domain.entities import LoanStatus, TransactionType

Base = declarative_base()


class User(Base):
    """Account holder model."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False)
    password_digest = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    accounts = relationship("Account", back_populates="user")


class Account(Base):
    """Bank account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    account_number = Column(String(6), unique=True, nullable=False)
    balance = Column(Numeric(12, 2), nullable=False, default=0)
    pin_digest = Column(String, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (CheckConstraint("balance >= 0", name="ck_account_balance_non_negative"),)

    # Relationships
    user = relationship("User", back_populates="accounts")
    loans = relationship("Loan", back_populates="account")


class Loan(Base):
    """Loan model."""

    __tablename__ = "loans"

    id = Column(Integer, primary_key=True)
    account_number = Column(String(6), ForeignKey("accounts.account_number"), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    interest_rate = Column(Numeric(5, 2), nullable=False)
    repayment_period = Column(Integer, nullable=False)
    outstanding_balance = Column(Numeric(12, 2), nullable=False)
    description = Column(String, nullable=False)
    status = Column(Enum(LoanStatus), nullable=False, default=LoanStatus.PENDING)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    account = relationship("Account", back_populates="loans")


class Transaction(Base):
    """Ledger entry model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    amount = Column(Numeric(12, 2), nullable=False)
    transaction_type = Column(Enum(TransactionType), nullable=False)
    transaction_date = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    source_account_number = Column(
        String(6), ForeignKey("accounts.account_number"), nullable=True
    )
    target_account_number = Column(
        String(6), ForeignKey("accounts.account_number"), nullable=True
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
