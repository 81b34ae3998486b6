from __future__ import annotations

import math

from ..config import DAY_HOURS_CAP, HOURS_PER_DAY
from .types import Number, PricingBreakdown, PricingMode


def _count(n: int, word: str) -> str:
    return f"{n} {word}{'' if n == 1 else 's'}"


def format_duration_for_pricing(duration_minutes: Number) -> str:
    """Render a rental length the way it is billed, e.g. "5 hours" or "2 days, 3 hours"."""
    if not math.isfinite(duration_minutes):
        return _count(0, "hour")
    hours = math.ceil(duration_minutes / 60)
    if hours <= HOURS_PER_DAY:
        return _count(hours, "hour")

    days, remainder = divmod(hours, HOURS_PER_DAY)
    if remainder == 0:
        return _count(days, "day")
    return f"{_count(days, 'day')}, {_count(remainder, 'hour')}"


def get_pricing_summary(breakdown: PricingBreakdown) -> str:
    """Short label for a breakdown ("3h", "1 day", "1d + 2h", "2 days")."""
    if breakdown.pricing_mode == PricingMode.HOURLY:
        return f"{breakdown.duration_hours}h"
    if breakdown.pricing_mode == PricingMode.DAY_CAP:
        return "1 day"

    days = breakdown.full_days or 0
    if breakdown.remainder_hours == 0:
        return _count(days, "day")
    if breakdown.remainder_hours <= DAY_HOURS_CAP:
        return f"{days}d + {breakdown.remainder_hours}h"
    # remainder was billed as one more day
    return _count(days + 1, "day")


__all__ = ["format_duration_for_pricing", "get_pricing_summary"]
