import json

import pytest

from rental_pricing import cli


def test_cli_default_samples_markdown(capsys):
    assert cli.main(["--rate", "10"]) == 0
    out = capsys.readouterr().out
    assert "Rental pricing sanity check: 10 cr/hr" in out
    assert "| 5 hours | 5 | HOURLY | - | - | 50 cr |" in out
    assert "| 6 hours | 6 | DAY_CAP | 1 | - | 50 cr |" in out
    assert "| 25 hours | 25 | MULTI_DAY | 1 | 1h | 60 cr |" in out
    assert "Day price (5 h cap): 50 cr" in out


def test_cli_custom_minutes_are_labelled(capsys):
    assert cli.main(["--rate", "10", "-m", "90", "-m", "1441"]) == 0
    out = capsys.readouterr().out
    assert "| 2 hours | 2 | HOURLY | - | - | 20 cr |" in out
    assert "| 1 day, 1 hour | 25 | MULTI_DAY | 1 | 1h | 60 cr |" in out


def test_cli_json_output(capsys):
    assert cli.main(["--rate", "10", "-m", "1800", "--output-format", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["hourlyRate"] == 10
    row = data["rows"][0]
    assert row["durationMinutes"] == 1800
    assert row["totalCredits"] == 100
    assert row["pricingMode"] == "MULTI_DAY"
    assert row["remainderCost"] == 50


def test_cli_shows_market_discount(capsys):
    assert cli.main(["--rate", "15", "--market-rate", "20", "-m", "60"]) == 0
    assert "Market price: 20 cr/hr (-25%)" in capsys.readouterr().out


def test_cli_rejects_non_positive_rate(capsys):
    assert cli.main(["--rate", "0"]) == 1
    assert "Invalid --rate value" in capsys.readouterr().out


def test_cli_quotes_booking_window(capsys):
    rc = cli.main(
        ["--rate", "10", "--start", "2025-01-06T15:00:00Z", "--end", "2025-01-07T16:00:00Z"]
    )
    assert rc == 0
    out = capsys.readouterr().out
    assert "Mon Jan 6, 9:00 AM → Tue Jan 7, 10:00 AM" in out
    assert "**Total:** 60 cr" in out


def test_cli_quote_json(capsys):
    rc = cli.main(
        [
            "--rate", "10",
            "--start", "2025-01-06T15:00:00Z",
            "--end", "2025-01-06T18:00:00Z",
            "--output-format", "json",
        ]
    )
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert data["pricing"]["totalCredits"] == 30
    assert data["summary"] == "3h"


def test_cli_quote_rejects_short_window(capsys):
    rc = cli.main(
        ["--rate", "10", "--start", "2025-01-06T15:00:00Z", "--end", "2025-01-06T15:30:00Z"]
    )
    assert rc == 1
    assert "Minimum booking duration" in capsys.readouterr().out


def test_cli_requires_both_start_and_end(capsys):
    assert cli.main(["--start", "2025-01-06T15:00:00Z"]) == 1
    assert "--start and --end" in capsys.readouterr().out


@pytest.mark.parametrize("rate", ["nan", "inf", "-inf"])
def test_cli_rejects_non_finite_rate(capsys, rate):
    assert cli.main([f"--rate={rate}"]) == 1
    assert "Invalid --rate value" in capsys.readouterr().out


def test_cli_rejects_non_finite_minutes(capsys):
    assert cli.main(["--rate", "10", "-m", "inf"]) == 1
    assert "Invalid --minutes value" in capsys.readouterr().out


def test_cli_quote_error_text_is_not_read_as_markup(capsys):
    rc = cli.main(["--rate", "10", "--start", "2025[/x]", "--end", "2025-01-06T18:00:00Z"])
    assert rc == 1
    out = capsys.readouterr().out
    assert "Cannot quote booking" in out
    assert "2025[/x]" in out
