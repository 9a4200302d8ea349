"""Domain layer for bankportal application."""

from bankportal.domain.transaction import TransactionService
from bankportal.domain.user import UserService
from bankportal.domain.account import AccountService
from bankportal.domain.loan import LoanService

__all__ = [
    "TransactionService",
    "UserService",
    "AccountService",
    "LoanService",
]
