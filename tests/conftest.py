"""Shared pytest fixtures for bankportal tests."""

import dataclasses
import tempfile
import os
from decimal import Decimal
import pytest

from bankportal.database.factories import create_sqlite_database
from bankportal.domain.account import AccountService
from bankportal.domain.loan import LoanService
from bankportal.domain.transaction import TransactionService
from bankportal.domain.user import UserService
from bankportal.utils.secret_hasher import SecretHasher

PASSWORD = "s3cret-password"
PIN = "1234"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def hasher():
    """Fast hasher so tests don't pay for scrypt on every PIN check."""
    return SecretHasher(method="pbkdf2:sha256:1000")


@pytest.fixture
def user_service(temp_db, hasher):
    return UserService(temp_db, hasher=hasher)


@pytest.fixture
def account_service(temp_db, hasher):
    return AccountService(temp_db, hasher=hasher)


@pytest.fixture
def loan_service(temp_db):
    return LoanService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    return TransactionService(temp_db)


@pytest.fixture
def make_account(user_service, account_service, temp_db):
    """Factory creating a registered user's account with optional PIN and balance."""
    counter = {"n": 0}

    def _make(balance: str = "0", pin: str | None = PIN):
        counter["n"] += 1
        user = user_service.register_user(
            name=f"User {counter['n']}",
            email=f"user{counter['n']}@example.com",
            password=PASSWORD,
        )
        account = account_service.create_account(user.id)
        if pin is not None:
            account_service.create_pin(account.account_number, password=PASSWORD, pin=pin)
        if Decimal(balance) != 0:
            # Seed the balance directly; seeding is not a ledger operation
            account = temp_db.get_account(account.account_number)
            temp_db.save_account(dataclasses.replace(account, balance=Decimal(balance)))
        return temp_db.get_account(account.account_number)

    return _make


@pytest.fixture
def funded_account(make_account):
    """Account with PIN 1234 and a balance of 1000."""
    return make_account(balance="1000")


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
