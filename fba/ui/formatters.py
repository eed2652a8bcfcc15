"""Display formatting for computed metrics."""

from __future__ import annotations
import math
from typing import Optional

PLACEHOLDER = "—"


def _is_displayable(value: Optional[float]) -> bool:
    if value is None:
        return False
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def format_number(value: Optional[float], digits: int = 2, placeholder: str = PLACEHOLDER) -> str:
    """
    Grouped decimal string, or the placeholder for NaN/inf/None.

    Examples:
        1234.5     -> '1,234.50'
        float('nan') -> '—'
    """
    if not _is_displayable(value):
        return placeholder
    return f"{value:,.{digits}f}"


def format_percent(value: Optional[float], placeholder: str = PLACEHOLDER) -> str:
    """One-decimal percentage ('12.3%'), or the placeholder for NaN/inf/None."""
    if not _is_displayable(value):
        return placeholder
    return f"{value:.1f}%"


def format_currency(
    value: Optional[float],
    symbol: str = "€",
    digits: int = 2,
    placeholder: str = PLACEHOLDER,
) -> str:
    """Currency amount ('€1,234.50', '-€3.50'); the placeholder carries no symbol."""
    if not _is_displayable(value):
        return placeholder
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{format_number(abs(value), digits)}"
