"""Credit pricing for car rentals: tariff calculator, duration and rate helpers."""

from .pricing import (
    PricingBreakdown,
    PricingMode,
    calculate_rental_price,
    format_duration_for_pricing,
    get_pricing_summary,
)

__all__ = [
    "PricingBreakdown",
    "PricingMode",
    "calculate_rental_price",
    "format_duration_for_pricing",
    "get_pricing_summary",
]
