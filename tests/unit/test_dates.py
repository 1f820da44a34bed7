from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from careerpath.core.dates import (
    duration_in_months,
    format_currency,
    tenure_in_years,
    to_iso_date,
    utc_now,
)

JOINED = datetime(2015, 1, 1)


def test_tenure_uses_exit_date_when_present():
    exited = JOINED + timedelta(days=365 * 3 + 10)
    assert tenure_in_years(JOINED, exited, now=datetime(2030, 1, 1)) == 3


def test_tenure_uses_now_while_employed():
    now = JOINED + timedelta(days=365 * 5 + 1)
    assert tenure_in_years(JOINED, None, now=now) == 5


def test_tenure_truncates_partial_years():
    now = JOINED + timedelta(days=364)
    assert tenure_in_years(JOINED, None, now=now) == 0


def test_tenure_stable_within_bucket_and_grows_across_it():
    start_of_bucket = JOINED + timedelta(days=365 * 2)
    end_of_bucket = JOINED + timedelta(days=365 * 3 - 1)
    next_bucket = JOINED + timedelta(days=365 * 3)

    assert tenure_in_years(JOINED, now=start_of_bucket) == 2
    assert tenure_in_years(JOINED, now=end_of_bucket) == 2
    assert tenure_in_years(JOINED, now=next_bucket) == 3


def test_tenure_never_negative():
    assert tenure_in_years(JOINED, JOINED - timedelta(days=800)) == 0


def test_duration_counts_thirty_day_periods():
    start = datetime(2020, 1, 1)
    assert duration_in_months(start, start + timedelta(days=89)) == 2
    assert duration_in_months(start, start + timedelta(days=90)) == 3


def test_duration_open_position_uses_now():
    start = datetime(2020, 1, 1)
    now = start + timedelta(days=300)
    assert duration_in_months(start, None, now=now) == 10


def test_duration_defaults_to_current_time():
    start = utc_now() - timedelta(days=61)
    assert duration_in_months(start) == 2


def test_aware_and_naive_datetimes_mix():
    start = datetime(2020, 1, 1, tzinfo=timezone.utc)
    now = datetime(2020, 1, 31)
    assert duration_in_months(start, now=now) == 1


def test_to_iso_date():
    assert to_iso_date(datetime(2024, 2, 9, 17, 45)) == "2024-02-09"
    assert to_iso_date(None) is None


def test_to_iso_date_converts_aware_values_to_utc():
    late_evening_new_york = datetime(2024, 2, 9, 21, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert to_iso_date(late_evening_new_york) == "2024-02-10"


def test_format_currency():
    assert format_currency(Decimal("95000.5")) == "$95,000.50"
    assert format_currency(0) == "$0.00"
    assert format_currency(Decimal("1234567.891")) == "$1,234,567.89"
    assert format_currency(Decimal("-42")) == "-$42.00"
