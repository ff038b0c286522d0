from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ..core.exceptions import ValidationError


def require_decimal(value, field_name: str, *, allow_none: bool = False) -> Decimal | None:
    """Parse a non-negative decimal from JSON/form input."""
    if value is None or value == "":
        if allow_none:
            return None
        raise ValidationError(f"{field_name} is required")
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a number")
    if not number.is_finite() or number < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    return number
