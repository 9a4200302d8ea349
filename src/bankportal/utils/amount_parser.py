"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

CENT = Decimal("0.01")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a monetary amount string into a Decimal with two decimal places.

    Handles various formats:
    - "500"
    - "123.45"
    - "$1,000.00"
    - "-100" (kept negative so the domain layer can reject it)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount quantized to cents

    Raises:
        ValueError: If the string is empty, not a number, or has more than
            two decimal places
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = amount_str.strip()

    # Remove currency symbols and thousands separators
    cleaned = re.sub(r"[$€£¥]", "", cleaned)
    cleaned = cleaned.replace(",", "").strip()

    try:
        amount = Decimal(cleaned)
        if not amount.is_finite():
            raise InvalidOperation
        quantized = amount.quantize(CENT)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if amount != quantized:
        raise ValueError(f"Amount '{amount_str}' has more than two decimal places")

    return quantized
