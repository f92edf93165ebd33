"""
ewallet/schemas/common.py

Validators shared by the money-carrying schemas.
"""

from decimal import Decimal


def validate_money_decimal(value: Decimal) -> Decimal:
    """
    Enforces max 2 decimal places and max 18 total digits,
    matching the Numeric(18, 2) columns. Works on the Decimal itself
    so exponent notation ('1E-7', '1E+20') is held to the same limits.
    """
    if not value.is_finite():
        raise ValueError("Value must be a finite number.")
    if value.as_tuple().exponent < -2:
        raise ValueError("Value cannot exceed 2 decimal places.")
    if value.adjusted() >= 16:  # 16 integer digits + 2 decimals = 18
        raise ValueError("Value cannot exceed 18 total digits.")
    return value
