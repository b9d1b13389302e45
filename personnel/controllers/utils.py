"""
Validation helpers shared by the controllers and the prompts.
"""

from decimal import Decimal, InvalidOperation

from personnel.exceptions import ValidationError


def is_valid_name(value: str) -> bool:
    """Non-blank text."""
    return bool(value and value.strip())


def to_decimal(value) -> Decimal | None:
    """Finite, non-negative Decimal for the input, or None when it is not one."""
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not amount.is_finite() or amount < 0:
        return None
    return amount


def is_valid_salary(value: str) -> bool:
    """Non-negative number such as '50000', '95000.50', '.5' or '1e5'."""
    return to_decimal(value) is not None


def parse_salary(value) -> Decimal:
    """Converts operator input to a Decimal rounded to cents."""
    amount = to_decimal(value)
    if amount is None:
        raise ValidationError(f"'{value}' is not a valid salary (numeric value).")
    try:
        return amount.quantize(Decimal("0.01"))
    except InvalidOperation:
        raise ValidationError(f"'{value}' is too large for a salary.")
