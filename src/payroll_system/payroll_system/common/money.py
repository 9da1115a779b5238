from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from ..core.constants import MONEY_PLACES

ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """Coerce a numeric-ish value to Decimal.

    None, empty strings, NaN and unparsable values become 0, so a NULL column
    reads the same as COALESCE(col, 0).
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            # str() keeps floats like 0.1 from dragging binary noise along
            result = Decimal(str(value).strip() or "0")
        except (InvalidOperation, ValueError):
            return ZERO
    if result.is_nan() or result.is_infinite():
        return ZERO
    return result


def round_money(value: Decimal) -> Decimal:
    """Round half-up to 2 decimal places, at any magnitude."""
    with localcontext() as ctx:
        # quantize needs every integer digit plus the two cents digits
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)
