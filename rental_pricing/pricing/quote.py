"""Quote a booking window before it is submitted.

The calculator prices anything; this layer is where an implausible booking
(reversed window, under an hour, unbookable rate) is rejected.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict

from ..config import MIN_BOOKING_MINUTES
from ..utils.timezone import Duration, Timestamp, calculate_duration_from_utc, parse_utc
from .calculator import calculate_rental_price
from .summary import format_duration_for_pricing, get_pricing_summary
from .types import Number, PricingBreakdown

logger = logging.getLogger(__name__)


class BookingQuoteError(ValueError):
    """Raised when a booking window cannot be quoted."""


@dataclass(frozen=True)
class BookingQuote:
    start_utc: str
    end_utc: str
    duration: Duration
    breakdown: PricingBreakdown
    duration_label: str
    summary: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startTs": self.start_utc,
            "endTs": self.end_utc,
            "durationMinutes": self.duration.total_minutes,
            "durationLabel": self.duration_label,
            "summary": self.summary,
            "pricing": self.breakdown.to_dict(),
        }


def quote_booking(start: Timestamp, end: Timestamp, hourly_rate: Number) -> BookingQuote:
    start_dt = parse_utc(start)
    end_dt = parse_utc(end)
    if end_dt <= start_dt:
        raise BookingQuoteError("End time must be after start time")

    duration = calculate_duration_from_utc(start_dt, end_dt)
    if duration.total_minutes < MIN_BOOKING_MINUTES:
        raise BookingQuoteError(f"Minimum booking duration is {MIN_BOOKING_MINUTES} minutes")

    if hourly_rate is None or not math.isfinite(hourly_rate) or hourly_rate <= 0:
        raise BookingQuoteError("Car has no valid hourly rate configured")

    breakdown = calculate_rental_price(duration.total_minutes, hourly_rate)
    logger.debug(
        "Quoted %s -> %s at %s cr/h: %s",
        start_dt.isoformat(),
        end_dt.isoformat(),
        hourly_rate,
        breakdown.breakdown_text,
    )
    return BookingQuote(
        start_utc=start_dt.isoformat(),
        end_utc=end_dt.isoformat(),
        duration=duration,
        breakdown=breakdown,
        duration_label=format_duration_for_pricing(duration.total_minutes),
        summary=get_pricing_summary(breakdown),
    )


__all__ = ["BookingQuote", "BookingQuoteError", "quote_booking"]
