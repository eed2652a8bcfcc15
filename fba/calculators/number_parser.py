"""Lenient parsing of numeric text typed into the calculator form."""

from __future__ import annotations
import math
import re
from typing import Optional

_NON_NUMERIC = re.compile(r"[^0-9.]")


def parse_number(raw: Optional[str]) -> float:
    """
    Parse free-form numeric text into a float.

    Never raises. Blank input (or input with nothing numeric left after
    cleaning) is 0.0; ambiguous or malformed input is NaN.

    Examples:
        ' 12,5 €' -> 12.5
        '1.2.3'   -> nan
        'abc'     -> 0.0
        '.'       -> nan
    """
    text = "" if raw is None else str(raw)
    cleaned = _NON_NUMERIC.sub("", text.strip().replace(",", "."))

    if not cleaned:
        return 0.0
    if cleaned.count(".") > 1:
        return math.nan

    try:
        return float(cleaned)
    except ValueError:
        return math.nan
