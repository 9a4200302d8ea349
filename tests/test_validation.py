"""Tests for amount and PIN validation helpers."""

import pytest
from decimal import Decimal

from bankportal.domain.errors import InvalidAmountError, InvalidPinError
from bankportal.domain.validation import validate_amount, validate_cents, validate_pin_format


class TestValidateAmount:
    """Tests for cash amount bounds."""

    @pytest.mark.parametrize("amount", ["100", "100.00", "500", "99900", "100000"])
    def test_valid_amounts(self, amount):
        validate_amount(Decimal(amount))

    @pytest.mark.parametrize("amount", ["0", "-100", "-0.01"])
    def test_non_positive_amounts_rejected(self, amount):
        with pytest.raises(InvalidAmountError):
            validate_amount(Decimal(amount))

    @pytest.mark.parametrize("amount", ["50", "150", "100.50", "999"])
    def test_non_multiple_of_100_rejected(self, amount):
        with pytest.raises(InvalidAmountError, match="multiples of 100"):
            validate_amount(Decimal(amount))

    def test_upper_bound(self):
        """Exactly 100,000 passes; anything above fails."""
        validate_amount(Decimal("100000"))
        with pytest.raises(InvalidAmountError):
            validate_amount(Decimal("100000.01"))
        with pytest.raises(InvalidAmountError, match="100,000"):
            validate_amount(Decimal("100100"))


class TestValidatePinFormat:
    """Tests for PIN format rules."""

    def test_four_digits_accepted(self):
        validate_pin_format("0000")
        validate_pin_format("9876")

    @pytest.mark.parametrize("pin", [None, ""])
    def test_empty_pin_rejected(self, pin):
        with pytest.raises(InvalidPinError, match="empty"):
            validate_pin_format(pin)

    @pytest.mark.parametrize("pin", ["123", "12345", "12a4", " 123", "١٢٣٤"])
    def test_bad_format_rejected(self, pin):
        with pytest.raises(InvalidPinError, match="4 digits"):
            validate_pin_format(pin)


class TestValidateCents:
    """Tests for the two-decimal money granularity."""

    @pytest.mark.parametrize("amount", ["1", "0.01", "250.50", "100.10"])
    def test_whole_cents_accepted(self, amount):
        validate_cents(Decimal(amount))

    @pytest.mark.parametrize("amount", ["0.004", "100.005", "1.001"])
    def test_sub_cent_rejected(self, amount):
        with pytest.raises(InvalidAmountError, match="two decimal places"):
            validate_cents(Decimal(amount))
