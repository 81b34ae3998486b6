from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

Number = Union[int, float]


class PricingMode(str, Enum):
    """Tariff branch that produced a breakdown."""

    HOURLY = "HOURLY"
    DAY_CAP = "DAY_CAP"
    MULTI_DAY = "MULTI_DAY"


@dataclass(frozen=True)
class PricingBreakdown:
    """Result of pricing one rental.

    ``full_days`` is None for HOURLY. For DAY_CAP it is always 1 with no
    remainder; for MULTI_DAY the remainder fields describe what was charged on
    top of the full days.
    """

    total_credits: Number
    pricing_mode: PricingMode
    full_days: Optional[int]
    remainder_hours: int
    remainder_cost: Number
    hourly_rate: Number
    day_rate: Number
    duration_hours: int
    breakdown_text: str

    def to_dict(self) -> Dict[str, Any]:
        # Keys match the booking record consumed by the UI / persistence layer.
        return {
            "totalCredits": self.total_credits,
            "pricingMode": self.pricing_mode.value,
            "fullDays": self.full_days,
            "remainderHours": self.remainder_hours,
            "remainderCost": self.remainder_cost,
            "hourlyRate": self.hourly_rate,
            "dayRate": self.day_rate,
            "durationHours": self.duration_hours,
            "breakdownText": self.breakdown_text,
        }


@dataclass(frozen=True)
class RateDisplay:
    hourly_rate: Number
    daily_rate: Number
    market_hourly_rate: Optional[Number] = None
    market_daily_rate: Optional[Number] = None
    discount_percent: int = 0
    has_discount: bool = False
