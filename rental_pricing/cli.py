#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Rental pricing – sanity-check CLI

Prints how the credit tariff prices a set of durations at a given hourly rate,
or quotes a single booking window:

    rental-pricing --rate 25
    rental-pricing --rate 10 -m 90 -m 1441 --output-format json
    rental-pricing --rate 10 --start 2025-03-01T15:00:00Z --end 2025-03-02T17:00:00Z
"""

import argparse
import logging
import math
import sys
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape

from .config import DAY_HOURS_CAP, DEFAULT_HOURLY_RATE, DEFAULT_LOG_LEVEL, TIMEZONE_LABEL
from .pricing import (
    PricingBreakdown,
    calculate_rental_price,
    describe_rate,
    quote_booking,
)
from .pricing.summary import format_duration_for_pricing
from .reporting import render_breakdown_table, render_quote
from .utils.timezone import format_date_range

console = Console()
logger = logging.getLogger("rental_pricing")

# (label, minutes)
SAMPLE_DURATIONS: List[Tuple[str, int]] = [
    ("1 hour", 60),
    ("2.5 hours", 150),
    ("4 hours", 240),
    ("5 hours", 300),
    ("6 hours", 360),
    ("12 hours", 720),
    ("1 day (24 h)", 1440),
    ("25 hours", 1500),
    ("30 hours", 1800),
    ("2 days", 2880),
    ("5 days", 7200),
    ("7 days (1 week)", 10080),
    ("14 days (2 weeks)", 20160),
]


# --------------------------------------------------------------------
# Argument parsing
# --------------------------------------------------------------------
def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rental-pricing",
        description=(
            "Rental pricing sanity check.\n\n"
            f"Hourly up to {DAY_HOURS_CAP}h, one day rate (hourly x {DAY_HOURS_CAP}) up to 24h,\n"
            "then full days plus an hourly or capped remainder."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--rate",
        type=float,
        default=DEFAULT_HOURLY_RATE,
        help="Hourly rate in credits.",
    )
    parser.add_argument(
        "--market-rate",
        type=float,
        default=None,
        help="Market (suggested) hourly rate, to show the discount badge.",
    )
    parser.add_argument(
        "-m",
        "--minutes",
        type=float,
        action="append",
        default=[],
        help="Duration in minutes to price. Repeatable; defaults to a built-in sample set.",
    )
    parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="Booking start (ISO-8601, UTC). Use with --end to quote one booking.",
    )
    parser.add_argument(
        "--end",
        type=str,
        default=None,
        help="Booking end (ISO-8601, UTC).",
    )
    parser.add_argument(
        "--output-format",
        choices=["markdown", "json"],
        default="markdown",
        help="markdown table or JSON breakdowns.",
    )
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default=DEFAULT_LOG_LEVEL.upper(),
        help="Logging level for internal messages.",
    )

    return parser.parse_args(argv)


# --------------------------------------------------------------------
# Helpers
# --------------------------------------------------------------------
def _normalize_rate(rate: float):
    # 20.0 -> 20 so totals print as whole credits
    return int(rate) if float(rate).is_integer() else rate


def _price_samples(rate, minutes: List[float]) -> List[Tuple[str, int, PricingBreakdown]]:
    samples = [(format_duration_for_pricing(m), m) for m in minutes] if minutes else SAMPLE_DURATIONS
    out = []
    for label, mins in samples:
        mins = int(mins) if float(mins).is_integer() else mins
        out.append((label, mins, calculate_rental_price(mins, rate)))
    return out


def _emit(text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _run_quote(args: argparse.Namespace, rate) -> int:
    try:
        quote = quote_booking(args.start, args.end, rate)
    except ValueError as ex:
        console.print(f"[red]Cannot quote booking: {escape(str(ex))}[/red]")
        return 1

    if args.output_format == "json":
        console.print_json(data=quote.to_dict(), highlight=False)
        return 0

    _emit(f"{format_date_range(quote.start_utc, quote.end_utc)} ({TIMEZONE_LABEL})")
    _emit(render_quote(quote.breakdown, quote.duration.total_minutes))
    return 0


# --------------------------------------------------------------------
# Main
# --------------------------------------------------------------------
def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )
    logger.debug("CLI arguments: %s", args)

    if not math.isfinite(args.rate) or args.rate <= 0:
        console.print("[red]Invalid --rate value. Must be a positive number.[/red]")
        return 1
    if not all(math.isfinite(m) for m in args.minutes):
        console.print("[red]Invalid --minutes value. Must be a finite number.[/red]")
        return 1
    if args.market_rate is not None and not math.isfinite(args.market_rate):
        console.print("[red]Invalid --market-rate value. Must be a finite number.[/red]")
        return 1
    rate = _normalize_rate(args.rate)
    market = _normalize_rate(args.market_rate) if args.market_rate is not None else None

    if args.start or args.end:
        if not (args.start and args.end):
            console.print("[red]--start and --end must be given together.[/red]")
            return 1
        return _run_quote(args, rate)

    priced = _price_samples(rate, args.minutes)
    logger.info("Priced %d durations at %s cr/h", len(priced), rate)

    if args.output_format == "json":
        console.print_json(
            data={
                "hourlyRate": rate,
                "rows": [
                    {"label": label, "durationMinutes": mins, **b.to_dict()}
                    for label, mins, b in priced
                ],
            },
            highlight=False,
        )
        return 0

    display = describe_rate(rate, market)
    _emit(f"Rental pricing sanity check: {rate} cr/hr")
    _emit("")
    _emit(render_breakdown_table((label, b) for label, _, b in priced))
    _emit("")
    _emit(f"Day price ({DAY_HOURS_CAP} h cap): {display.daily_rate} cr")
    if display.has_discount:
        _emit(f"Market price: {display.market_hourly_rate} cr/hr (-{display.discount_percent}%)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
