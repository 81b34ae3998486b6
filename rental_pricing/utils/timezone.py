"""Business-timezone helpers.

Bookings are stored as UTC and shown in the business timezone
(America/Chicago unless RENTALPRICING_TIMEZONE says otherwise).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import List, Optional, Union

import pytz

from ..config import BUSINESS_TIMEZONE, HOURS_PER_DAY, SLOT_MINUTES, TIMEZONE_LABEL

Timestamp = Union[str, datetime]


def business_tz():
    return pytz.timezone(BUSINESS_TIMEZONE)


def parse_utc(value: Timestamp) -> datetime:
    """Parse an ISO-8601 timestamp (or pass a datetime through) as an aware UTC datetime.

    Naive values are taken to be UTC already.
    """
    if isinstance(value, datetime):
        dt = value
    else:
        raw = value.strip()
        if raw.endswith("Z") or raw.endswith("z"):
            raw = raw[:-1] + "+00:00"
        dt = datetime.fromisoformat(raw)
    if dt.tzinfo is None:
        return pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc)


# --------------------------------------------------------------------
# Conversion
# --------------------------------------------------------------------
def utc_to_business_tz(utc_iso: Timestamp) -> datetime:
    return parse_utc(utc_iso).astimezone(business_tz())


def business_tz_to_utc(local_date: date, hhmm: str) -> str:
    """Combine a business-local date and "HH:MM" into a UTC ISO string ("...Z")."""
    hours, minutes = (int(p) for p in hhmm.split(":")[:2])
    local = business_tz().localize(datetime.combine(local_date, time(hours, minutes)))
    utc = local.astimezone(pytz.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.000Z")


def now_in_business_tz(now: Optional[datetime] = None) -> datetime:
    return parse_utc(now or datetime.now(pytz.utc)).astimezone(business_tz())


# --------------------------------------------------------------------
# Formatting
# --------------------------------------------------------------------
def format_time_12h(hhmm: str) -> str:
    h, m = (int(p) for p in hhmm.split(":")[:2])
    ampm = "PM" if h >= 12 else "AM"
    hour12 = h % 12 or 12
    return f"{hour12}:{m:02d} {ampm}"


def format_date_short(d: date) -> str:
    return f"{d:%a, %b} {d.day}"


def format_utc_for_display(utc_iso: Timestamp, fmt: Optional[str] = None) -> str:
    """Display a UTC timestamp in business time, default "Mon, Jan 6 at 9:00 AM".

    ``fmt`` is a strftime pattern applied to the business-local datetime.
    """
    local = utc_to_business_tz(utc_iso)
    if fmt:
        return local.strftime(fmt)
    return f"{format_date_short(local)} at {format_time_12h(f'{local:%H:%M}')}"


def format_date_range(start_utc: Timestamp, end_utc: Timestamp) -> str:
    def _fmt(ts: Timestamp) -> str:
        local = utc_to_business_tz(ts)
        return f"{local:%a %b} {local.day}, {format_time_12h(f'{local:%H:%M}')}"

    return f"{_fmt(start_utc)} → {_fmt(end_utc)}"


def timezone_label() -> str:
    return TIMEZONE_LABEL


# --------------------------------------------------------------------
# Durations
# --------------------------------------------------------------------
@dataclass(frozen=True)
class Duration:
    total_minutes: int
    days: int
    hours: int
    minutes: int


def calculate_duration_from_utc(start_utc: Timestamp, end_utc: Timestamp) -> Duration:
    """Split the window into days, hours and minutes.

    Days are floored; hours and minutes keep the sign of the window, so a
    reversed window of 90 minutes gives (days=-1, hours=-2, minutes=-30).
    """
    delta = parse_utc(end_utc) - parse_utc(start_utc)
    # whole minutes, truncated toward zero
    total_minutes = int(delta.total_seconds() / 60)
    days = total_minutes // (HOURS_PER_DAY * 60)
    rest = int(math.fmod(total_minutes, HOURS_PER_DAY * 60))
    hours = rest // 60
    minutes = int(math.fmod(rest, 60))
    return Duration(total_minutes=total_minutes, days=days, hours=hours, minutes=minutes)


def format_duration(duration: Duration) -> str:
    parts: List[str] = []
    if duration.days > 0:
        parts.append(f"{duration.days} day{'' if duration.days == 1 else 's'}")
    if duration.hours > 0:
        parts.append(f"{duration.hours} hour{'' if duration.hours == 1 else 's'}")
    if duration.minutes > 0:
        parts.append(f"{duration.minutes} min")
    return ", ".join(parts) or "0 hours"


def format_duration_short(duration: Duration) -> str:
    parts: List[str] = []
    if duration.days > 0:
        parts.append(f"{duration.days}d")
    if duration.hours > 0:
        parts.append(f"{duration.hours}h")
    if duration.minutes > 0 and duration.days == 0:
        parts.append(f"{duration.minutes}m")
    return " ".join(parts) or "0h"


# --------------------------------------------------------------------
# Time slots
# --------------------------------------------------------------------
def generate_time_slots() -> List[str]:
    return [f"{h:02d}:{m:02d}" for h in range(HOURS_PER_DAY) for m in range(0, 60, SLOT_MINUTES)]


def get_next_time_slot(now: Optional[datetime] = None) -> str:
    """Next half-hour slot after ``now`` in business time (wraps past midnight)."""
    local = now_in_business_tz(now)
    if local.minute < 30:
        hour, minute = local.hour, 30
    else:
        hour, minute = local.hour + 1, 0
    return f"{hour % HOURS_PER_DAY:02d}:{minute:02d}"


__all__ = [
    "Duration",
    "business_tz_to_utc",
    "calculate_duration_from_utc",
    "format_date_range",
    "format_date_short",
    "format_duration",
    "format_duration_short",
    "format_time_12h",
    "format_utc_for_display",
    "generate_time_slots",
    "get_next_time_slot",
    "now_in_business_tz",
    "parse_utc",
    "timezone_label",
    "utc_to_business_tz",
]
