"""Mini README: Presentation helpers shared by every interface.

Exports the per-field change trackers that drive flash highlighting and
the currency formatting used for values and deltas.
"""

from .changes import DEFAULT_DWELL_SECONDS, ChangeBoard, FieldChange, FlashingValue
from .formatting import Tone, format_currency, format_delta, tone_for

__all__ = [
    "ChangeBoard",
    "DEFAULT_DWELL_SECONDS",
    "FieldChange",
    "FlashingValue",
    "Tone",
    "format_currency",
    "format_delta",
    "tone_for",
]
