from .calculator import calculate_rental_price, day_rate_for, price_remainder
from .quote import BookingQuote, BookingQuoteError, quote_booking
from .rates import describe_rate, effective_hourly_rate
from .summary import format_duration_for_pricing, get_pricing_summary
from .types import PricingBreakdown, PricingMode, RateDisplay

__all__ = [
    "BookingQuote",
    "BookingQuoteError",
    "PricingBreakdown",
    "PricingMode",
    "RateDisplay",
    "calculate_rental_price",
    "day_rate_for",
    "describe_rate",
    "effective_hourly_rate",
    "format_duration_for_pricing",
    "get_pricing_summary",
    "price_remainder",
    "quote_booking",
]
