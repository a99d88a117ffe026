"""
Utility helpers for formatting enrollment counts and period-over-period deltas.
"""

from __future__ import annotations

from typing import Optional

PLACEHOLDER = "—"
MAX_FRACTION_DIGITS = 3


def format_number(value: Optional[float]) -> str:
    """en-US grouping with up to three fraction digits; placeholder for None."""
    if value is None:
        return PLACEHOLDER
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return PLACEHOLDER
    if numeric.is_integer():
        return f"{int(numeric):,}"
    formatted = f"{numeric:,.{MAX_FRACTION_DIGITS}f}".rstrip("0").rstrip(".")
    return "0" if formatted in ("-0", "") else formatted


def format_percent(value: Optional[float], decimals: int = 1) -> str:
    if value is None:
        return PLACEHOLDER
    try:
        return f"{value:.{decimals}f}%"
    except (TypeError, ValueError):
        return PLACEHOLDER


def format_delta(current: Optional[float], baseline: Optional[float]) -> str:
    """Absolute change plus percentage of the baseline, e.g. "20 (20.0%)".

    The percentage is dropped when the baseline is zero.
    """
    if current is None or baseline is None:
        return PLACEHOLDER
    delta = current - baseline
    if baseline == 0:
        return format_number(delta)
    return f"{format_number(delta)} ({format_percent(delta / baseline * 100)})"
