from datetime import date, datetime

import pytest

from everyday.core.errors import ValidationError
from everyday.lib.days import parse_day, to_day, window

TODAY = date(2025, 5, 8)  # thursday


def test_to_day_strips_time():
    assert to_day(datetime(2025, 5, 8, 23, 59, 59)) == TODAY


def test_to_day_keeps_date():
    assert to_day(TODAY) is TODAY


def test_parse_day_defaults_to_today():
    assert parse_day(None, TODAY) == TODAY
    assert parse_day("today", TODAY) == TODAY


def test_parse_day_uses_clock_when_today_omitted():
    assert parse_day(None) == date(2025, 5, 8)


def test_parse_day_yesterday():
    assert parse_day("yesterday", TODAY) == date(2025, 5, 7)


def test_parse_day_offset():
    assert parse_day("-3", TODAY) == date(2025, 5, 5)


@pytest.mark.parametrize(
    ("ref", "expected"),
    [
        ("thu", date(2025, 5, 8)),
        ("mon", date(2025, 5, 5)),
        ("friday", date(2025, 5, 2)),
    ],
)
def test_parse_day_weekday_looks_back(ref, expected):
    assert parse_day(ref, TODAY) == expected


def test_parse_day_iso():
    assert parse_day("2025-04-30", TODAY) == date(2025, 4, 30)


def test_parse_day_rejects_garbage():
    with pytest.raises(ValidationError):
        parse_day("not a day", TODAY)


def test_window_is_contiguous():
    days = window(date(2025, 4, 28), 21)
    assert len(days) == 21
    assert days[0] == date(2025, 4, 28)
    assert days[-1] == date(2025, 5, 18)


def test_parse_day_rejects_offset_out_of_range():
    with pytest.raises(ValidationError):
        parse_day("-1000000", TODAY)
