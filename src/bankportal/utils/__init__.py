"""Utility functions for bankportal."""

from bankportal.utils.amount_parser import parse_amount
from bankportal.utils.secret_hasher import SecretHasher

__all__ = ["parse_amount", "SecretHasher"]
