#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
config.py

Configuration constants and defaults for the rental pricing package.

Key idea: the tariff is FIXED, the surroundings are not
--------------------------------------------------------
The credit tariff (hourly up to 5 hours, one day rate up to 24 hours, then
full days plus a remainder) is a business rule shared with the booking RPC
and the catalog UI. Its constants live here but are NOT read from the
environment, so every caller prices a booking the same way.

Everything around the tariff (default rate for the CLI, business timezone,
log level) can be overridden with RENTALPRICING_* environment variables.
"""

import os

# ---------------------------------------------------------------------
# Tariff
# ---------------------------------------------------------------------
# DAY_HOURS_CAP:
# - Day rate = hourly rate * DAY_HOURS_CAP.
# - Also the largest duration (in hours) still billed hourly.
DAY_HOURS_CAP = 5

# HOURS_PER_DAY:
# - Size of one full day when splitting multi-day rentals.
HOURS_PER_DAY = 24

# MIN_BOOKING_MINUTES:
# - Shortest window accepted when quoting a booking from timestamps.
# - The calculator itself does not enforce it.
MIN_BOOKING_MINUTES = 60

# ---------------------------------------------------------------------
# Defaults: rate / timezone
# ---------------------------------------------------------------------
# DEFAULT_HOURLY_RATE:
# - Used by the CLI sanity table when --rate is not given.
DEFAULT_HOURLY_RATE = int(os.getenv("RENTALPRICING_DEFAULT_RATE", "20"))

# BUSINESS_TIMEZONE:
# - Booking times are stored as UTC and shown to users in this zone.
BUSINESS_TIMEZONE = os.getenv("RENTALPRICING_TIMEZONE", "America/Chicago")
TIMEZONE_LABEL = os.getenv("RENTALPRICING_TIMEZONE_LABEL", "Central Time (Chicago)")

# SLOT_MINUTES:
# - Granularity of the booking time picker.
SLOT_MINUTES = 30

# ---------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------
DEFAULT_LOG_LEVEL = os.getenv("RENTALPRICING_LOG_LEVEL", "WARNING")

# ---------------------------------------------------------------------
# Packaged definitions (YAML)
# ---------------------------------------------------------------------
# DEFINITIONS_DIR:
# - Folder holding data tables such as the PI class ranges.
# - Override to test alternative tables without touching the package.
DEFINITIONS_DIR = os.getenv("RENTALPRICING_DEFINITIONS_DIR", "").strip()
