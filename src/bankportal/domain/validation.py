"""Validation helpers shared by the account and loan services."""

import re
from decimal import Decimal
from typing import Optional

from bankportal.domain import errors

MINIMUM_UNIT = Decimal("100")
MAXIMUM_CASH_AMOUNT = Decimal("100000")
CENT = Decimal("0.01")

_PIN_PATTERN = re.compile(r"[0-9]{4}")


def validate_amount(amount: Decimal) -> None:
    """Validate a deposit, withdrawal or transfer amount.

    Args:
        amount: Amount to validate

    Raises:
        InvalidAmountError: If the amount is not positive, not a multiple of
            100, or greater than 100,000
    """
    if amount <= 0:
        raise errors.InvalidAmountError(errors.amount_must_be_positive(amount))

    if amount % MINIMUM_UNIT != 0:
        raise errors.InvalidAmountError(errors.AMOUNT_NOT_MULTIPLE_OF_100)

    if amount > MAXIMUM_CASH_AMOUNT:
        raise errors.InvalidAmountError(errors.AMOUNT_EXCEEDS_LIMIT)


def validate_cents(amount: Decimal) -> None:
    """Reject amounts finer than one cent.

    Money columns hold two decimal places, so a finer amount would be stored
    rounded while the ledger kept the unrounded value.

    Raises:
        InvalidAmountError: If the amount has more than two decimal places
    """
    if amount != amount.quantize(CENT):
        raise errors.InvalidAmountError(errors.AMOUNT_TOO_PRECISE)


def validate_pin_format(pin: Optional[str]) -> None:
    """Validate the format of a PIN being set.

    Raises:
        InvalidPinError: If the PIN is empty or not exactly four digits
    """
    if not pin:
        raise errors.InvalidPinError(errors.PIN_EMPTY)

    if not _PIN_PATTERN.fullmatch(pin):
        raise errors.InvalidPinError(errors.PIN_FORMAT_INVALID)
