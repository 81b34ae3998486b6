"""Rental pricing calculator.

Tariff (credits):
- duration <= 5 hours     -> hourly: hours * hourly_rate
- 5 < duration <= 24 hours -> one day rate (hourly_rate * 5)
- duration > 24 hours      -> full_days * day_rate + remainder cost, where the
  remainder is free when 0, hourly when <= 5 hours, one day rate otherwise.

Durations are given in minutes and always rounded UP to whole hours before the
tier is chosen. Non-positive inputs price to zero instead of raising.
"""

from __future__ import annotations

import math

from ..config import DAY_HOURS_CAP, HOURS_PER_DAY
from .types import Number, PricingBreakdown, PricingMode


def _plural(n: Number, word: str) -> str:
    return f"{_num(n)} {word}{'' if n == 1 else 's'}"


def _num(v: Number) -> str:
    # 25.0 -> "25", 12.5 -> "12.5"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def day_rate_for(hourly_rate: Number) -> Number:
    return hourly_rate * DAY_HOURS_CAP


def price_remainder(remainder_hours: int, hourly_rate: Number) -> Number:
    """Cost of the hours left over after whole days (same rule as the top level)."""
    if remainder_hours <= 0:
        return 0
    if remainder_hours <= DAY_HOURS_CAP:
        return remainder_hours * hourly_rate
    return day_rate_for(hourly_rate)


def _zero_breakdown(hourly_rate: Number) -> PricingBreakdown:
    return PricingBreakdown(
        total_credits=0,
        pricing_mode=PricingMode.HOURLY,
        full_days=None,
        remainder_hours=0,
        remainder_cost=0,
        hourly_rate=hourly_rate,
        day_rate=day_rate_for(hourly_rate),
        duration_hours=0,
        breakdown_text="0 credits",
    )


def calculate_rental_price(duration_minutes: Number, hourly_rate: Number) -> PricingBreakdown:
    """Price a rental of ``duration_minutes`` at ``hourly_rate`` credits per hour."""
    # NaN and infinities price to zero like any other unusable input
    if not (math.isfinite(duration_minutes) and math.isfinite(hourly_rate)):
        return _zero_breakdown(hourly_rate)
    if duration_minutes <= 0 or hourly_rate <= 0:
        return _zero_breakdown(hourly_rate)

    duration_hours = math.ceil(duration_minutes / 60)
    day_rate = day_rate_for(hourly_rate)

    if duration_hours <= DAY_HOURS_CAP:
        total = duration_hours * hourly_rate
        return PricingBreakdown(
            total_credits=total,
            pricing_mode=PricingMode.HOURLY,
            full_days=None,
            remainder_hours=duration_hours,
            remainder_cost=total,
            hourly_rate=hourly_rate,
            day_rate=day_rate,
            duration_hours=duration_hours,
            breakdown_text=f"{_plural(duration_hours, 'hour')} × {_num(hourly_rate)} cr = {_num(total)} credits",
        )

    if duration_hours <= HOURS_PER_DAY:
        return PricingBreakdown(
            total_credits=day_rate,
            pricing_mode=PricingMode.DAY_CAP,
            full_days=1,
            remainder_hours=0,
            remainder_cost=0,
            hourly_rate=hourly_rate,
            day_rate=day_rate,
            duration_hours=duration_hours,
            breakdown_text=f"1 day ({duration_hours}h capped at {DAY_HOURS_CAP}h) = {_num(day_rate)} credits",
        )

    full_days, remainder = divmod(duration_hours, HOURS_PER_DAY)
    remainder_cost = price_remainder(remainder, hourly_rate)
    total = full_days * day_rate + remainder_cost

    day_part = f"{_plural(full_days, 'day')} × {_num(day_rate)} cr"
    if remainder == 0:
        text = f"{day_part} = {_num(total)} credits"
    elif remainder <= DAY_HOURS_CAP:
        text = f"{day_part} + {remainder}h × {_num(hourly_rate)} cr = {_num(total)} credits"
    else:
        text = f"{day_part} + 1 day ({remainder}h capped) = {_num(total)} credits"

    return PricingBreakdown(
        total_credits=total,
        pricing_mode=PricingMode.MULTI_DAY,
        full_days=full_days,
        remainder_hours=remainder,
        remainder_cost=remainder_cost,
        hourly_rate=hourly_rate,
        day_rate=day_rate,
        duration_hours=duration_hours,
        breakdown_text=text,
    )


__all__ = ["calculate_rental_price", "day_rate_for", "price_remainder"]
