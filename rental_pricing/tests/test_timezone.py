from datetime import date, datetime, timezone

import pytest

from rental_pricing.utils.timezone import (
    Duration,
    business_tz_to_utc,
    calculate_duration_from_utc,
    format_date_range,
    format_date_short,
    format_duration,
    format_duration_short,
    format_time_12h,
    format_utc_for_display,
    generate_time_slots,
    get_next_time_slot,
    parse_utc,
    utc_to_business_tz,
)


def test_utc_to_business_tz_winter_offset():
    local = utc_to_business_tz("2025-01-06T15:00:00Z")
    assert (local.hour, local.minute) == (9, 0)
    assert local.utcoffset().total_seconds() == -6 * 3600


def test_business_tz_to_utc_summer_offset():
    assert business_tz_to_utc(date(2025, 7, 4), "10:30") == "2025-07-04T15:30:00.000Z"


def test_business_tz_to_utc_winter_offset():
    assert business_tz_to_utc(date(2025, 1, 6), "09:00") == "2025-01-06T15:00:00.000Z"


def test_parse_utc_treats_naive_as_utc():
    dt = parse_utc(datetime(2025, 1, 6, 15, 0))
    assert dt.utcoffset().total_seconds() == 0
    assert dt.hour == 15


def test_format_utc_for_display_default():
    assert format_utc_for_display("2025-01-06T15:00:00Z") == "Mon, Jan 6 at 9:00 AM"


def test_format_utc_for_display_custom_pattern():
    assert format_utc_for_display("2025-01-06T15:00:00Z", "%Y-%m-%d %H:%M") == "2025-01-06 09:00"


def test_format_date_short():
    assert format_date_short(date(2025, 1, 6)) == "Mon, Jan 6"


@pytest.mark.parametrize(
    "hhmm,expected",
    [("00:05", "12:05 AM"), ("09:30", "9:30 AM"), ("12:00", "12:00 PM"), ("13:07", "1:07 PM")],
)
def test_format_time_12h(hhmm, expected):
    assert format_time_12h(hhmm) == expected


def test_format_date_range():
    text = format_date_range("2025-01-06T15:00:00Z", "2025-01-07T18:30:00Z")
    assert text == "Mon Jan 6, 9:00 AM → Tue Jan 7, 12:30 PM"


def test_calculate_duration_from_utc_splits_parts():
    d = calculate_duration_from_utc("2025-01-06T15:00:00Z", "2025-01-08T18:45:30Z")
    assert d == Duration(total_minutes=3105, days=2, hours=3, minutes=45)


def test_format_duration():
    assert format_duration(Duration(0, 0, 0, 0)) == "0 hours"
    assert format_duration(Duration(1565, 1, 2, 5)) == "1 day, 2 hours, 5 min"
    assert format_duration(Duration(60, 0, 1, 0)) == "1 hour"
    assert format_duration(Duration(2880, 2, 0, 0)) == "2 days"


def test_format_duration_short_drops_minutes_once_days_present():
    assert format_duration_short(Duration(1565, 1, 2, 5)) == "1d 2h"
    assert format_duration_short(Duration(125, 0, 2, 5)) == "2h 5m"
    assert format_duration_short(Duration(0, 0, 0, 0)) == "0h"


def test_generate_time_slots():
    slots = generate_time_slots()
    assert len(slots) == 48
    assert slots[:3] == ["00:00", "00:30", "01:00"]
    assert slots[-1] == "23:30"


@pytest.mark.parametrize(
    "now,expected",
    [
        (datetime(2025, 1, 6, 15, 0, tzinfo=timezone.utc), "09:30"),
        (datetime(2025, 1, 6, 15, 10, tzinfo=timezone.utc), "09:30"),
        (datetime(2025, 1, 6, 15, 45, tzinfo=timezone.utc), "10:00"),
        (datetime(2025, 1, 7, 5, 40, tzinfo=timezone.utc), "00:00"),
    ],
)
def test_get_next_time_slot(now, expected):
    assert get_next_time_slot(now) == expected


def test_calculate_duration_from_utc_reversed_window_keeps_sign():
    d = calculate_duration_from_utc("2025-01-06T16:30:00Z", "2025-01-06T15:00:00Z")
    assert d == Duration(total_minutes=-90, days=-1, hours=-2, minutes=-30)
