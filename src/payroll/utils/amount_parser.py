"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse a money amount string into a Decimal.

    Handles various formats:
    - "200000"
    - "200000.50"
    - "$1,500.00"
    - "Rp 200,000"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = amount_str.strip()

    # Remove currency prefix
    cleaned = re.sub(r"^(Rp\.?|\$)\s*", "", cleaned, flags=re.IGNORECASE)

    # Remove thousands separators
    cleaned = cleaned.replace(",", "").replace("_", "")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount
