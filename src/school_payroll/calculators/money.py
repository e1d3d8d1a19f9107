"""Decimal coercion, rounding, and peso formatting helpers."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

CENTS = Decimal("0.01")
ZERO = Decimal("0")

DEFAULT_CURRENCY_SYMBOL = "₱"

# Symbols and codes stripped before parsing
_CURRENCY_MARKERS = re.compile(r"(₱|PHP|Php|php|\$)")
_SEPARATORS = re.compile(r"[,\s ]")


def to_decimal(value: Any) -> Decimal:
    """Coerce a number or numeric string to Decimal.

    Anything that is not a finite number becomes 0.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            return ZERO
    else:
        return ZERO

    if not result.is_finite():
        return ZERO
    return result


def round_to_cents(amount: Decimal) -> Decimal:
    """Round amount to 2 decimal places (cents), half-up.

    Precision is widened so amounts past the default 28 digits still quantize.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_number(value: Any) -> str:
    """Format with thousands separators and 2 decimals, e.g. 1,234.50."""
    return f"{round_to_cents(to_decimal(value)):,.2f}"


def format_currency(value: Any, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format as peso currency, e.g. ₱1,234.50 or -₱1,234.50."""
    amount = round_to_cents(to_decimal(value))
    if amount < 0:
        return f"-{symbol}{-amount:,.2f}"
    return f"{symbol}{amount:,.2f}"


def parse_currency(text: Any) -> Decimal:
    """Parse a formatted amount back to Decimal.

    Currency symbols, thousands separators and whitespace are stripped.
    Empty or unparseable input returns 0.
    """
    if isinstance(text, (Decimal, int, float)):
        return to_decimal(text)
    if not isinstance(text, str) or not text.strip():
        return ZERO

    cleaned = _SEPARATORS.sub("", _CURRENCY_MARKERS.sub("", text))
    if not cleaned:
        return ZERO
    return to_decimal(cleaned)
