"""Mini README: Currency rendering for statement values and deltas.

Structure:
    * Tone - visual tone derived from a delta sign.
    * tone_for - pick the tone for an optional delta.
    * format_currency - whole-unit amount with symbol and digit grouping.
    * format_delta - signed amount wrapped in parentheses.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Optional


class Tone(str, Enum):
    """Highlight colour families used by the dashboard."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


def tone_for(delta: Optional[float]) -> Tone:
    if delta is None or delta == 0:
        return Tone.NEUTRAL
    return Tone.POSITIVE if delta > 0 else Tone.NEGATIVE


def _whole_units(amount: float) -> int:
    # Ties round away from zero.
    return int(Decimal(repr(float(amount))).to_integral_value(rounding=ROUND_HALF_UP))


def format_currency(amount: float, symbol: str = "$", thousands_separator: str = ",") -> str:
    """Render ``amount`` as ``-$1,234`` style text without fractional digits."""

    units = _whole_units(amount)
    digits = f"{abs(units):,}".replace(",", thousands_separator)
    sign = "-" if units < 0 else ""
    return f"{sign}{symbol}{digits}"


def format_delta(delta: float, symbol: str = "$", thousands_separator: str = ",") -> str:
    """Render a change as ``(+$50,000)`` or ``(-$20,000)``."""

    prefix = "+" if _whole_units(delta) > 0 else ""
    return f"({prefix}{format_currency(delta, symbol, thousands_separator)})"
