"""Rate helpers shared by the catalog cards and the booking flow."""

from __future__ import annotations

import logging
from typing import Optional

from .calculator import day_rate_for
from .types import Number, RateDisplay

logger = logging.getLogger(__name__)


def effective_hourly_rate(
    unit_rate: Optional[Number],
    suggested_rate: Optional[Number] = None,
) -> Optional[Number]:
    """Rate a booking is charged at: the unit's own rate, else the model's suggested rate.

    Returns None when neither is a positive number, i.e. the unit cannot be booked.
    """
    rate = unit_rate if unit_rate is not None else suggested_rate
    if rate is None or rate <= 0:
        logger.debug("No bookable rate (unit_rate=%s, suggested_rate=%s)", unit_rate, suggested_rate)
        return None
    return rate


def describe_rate(hourly_rate: Number, market_hourly_rate: Optional[Number] = None) -> RateDisplay:
    has_discount = market_hourly_rate is not None and hourly_rate < market_hourly_rate
    discount = 0
    if has_discount and market_hourly_rate:
        # round half up, matching the catalog badge
        discount = int(((market_hourly_rate - hourly_rate) / market_hourly_rate) * 100 + 0.5)

    return RateDisplay(
        hourly_rate=hourly_rate,
        daily_rate=day_rate_for(hourly_rate),
        market_hourly_rate=market_hourly_rate,
        market_daily_rate=day_rate_for(market_hourly_rate) if market_hourly_rate else None,
        discount_percent=discount,
        has_discount=has_discount,
    )


__all__ = ["day_rate_for", "describe_rate", "effective_hourly_rate"]
