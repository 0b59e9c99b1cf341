from datetime import date, datetime

import pytest

from hostel_leave.utils.datetime_utils import (
    NOT_AVAILABLE,
    format_iso,
    format_local_datetime,
    parse_datetime,
)


def test_midnight_utc_renders_in_india_time():
    assert format_local_datetime(datetime(2025, 1, 1)) == "01 Jan 2025, 05:30 AM"


def test_afternoon_uses_twelve_hour_clock():
    assert format_local_datetime(datetime(2025, 3, 9, 10, 15)) == "09 Mar 2025, 03:45 PM"


def test_other_time_zone():
    assert format_local_datetime(datetime(2025, 1, 1, 12, 0), tz_name="UTC") == "01 Jan 2025, 12:00 PM"


def test_missing_value_renders_not_available():
    assert format_local_datetime(None) == NOT_AVAILABLE == "Not Available"


def test_date_only_string_is_midnight_utc():
    assert parse_datetime("2025-01-01") == datetime(2025, 1, 1)


def test_aware_string_is_converted_to_naive_utc():
    assert parse_datetime("2025-01-01T05:30:00+05:30") == datetime(2025, 1, 1, 0, 0)


def test_date_object_is_accepted():
    assert parse_datetime(date(2025, 2, 3)) == datetime(2025, 2, 3)


@pytest.mark.parametrize("value", ["", "   ", "not a date", 42, "0001-01-01T00:00:00+05:30"])
def test_unparseable_values_raise_value_error(value):
    with pytest.raises(ValueError):
        parse_datetime(value)


def test_format_iso_marks_utc():
    assert format_iso(datetime(2025, 1, 1)) == "2025-01-01T00:00:00+00:00"
    assert format_iso(None) is None


def test_settings_reject_unknown_time_zone(tmp_path):
    from pydantic import ValidationError

    from conftest import make_settings

    with pytest.raises(ValidationError):
        make_settings(tmp_path, TIMEZONE="Mars/Olympus")
