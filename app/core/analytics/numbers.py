"""Number rounding and display helpers for dashboard metrics."""
from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` with halves going up (``2.5 -> 3``), unlike ``round``."""

    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    return int(round_half_up(value))


def format_number(value: int) -> str:
    """Return ``value`` with a comma every three digits, e.g. ``1,234,567``."""

    return f"{value:,}"
