"""Tests for date formatting."""

import datetime

import pytest

from utilkit import format_date


def test_day_month_year():
    assert format_date(datetime.date(2026, 2, 10), "DD/MM/YYYY") == "10/02/2026"


def test_default_pattern():
    assert format_date(datetime.date(2026, 2, 10)) == "2026-02-10"


def test_all_tokens():
    moment = datetime.datetime(2026, 2, 10, 9, 5, 3)
    assert format_date(moment, "YYYY-MM-DD HH:mm:ss") == "2026-02-10 09:05:03"


def test_only_first_occurrence_replaced():
    assert format_date(datetime.date(2026, 2, 10), "DD DD") == "10 DD"


def test_tokens_are_case_sensitive():
    moment = datetime.datetime(2026, 2, 10, 14, 30)
    assert format_date(moment, "MM mm") == "02 30"


def test_pattern_without_tokens_is_unchanged():
    assert format_date(datetime.date(2026, 2, 10), "today") == "today"


def test_plain_date_has_midnight_time():
    assert format_date(datetime.date(2026, 2, 10), "HH:mm:ss") == "00:00:00"


def test_year_is_not_padded():
    assert format_date(datetime.date(999, 1, 1), "YYYY") == "999"


def test_default_pattern_from_settings(settings_env):
    settings_env.setenv("UTILKIT_DATE_PATTERN", "DD.MM.YYYY")
    assert format_date(datetime.date(2026, 2, 10)) == "10.02.2026"


def test_rejects_non_dates():
    with pytest.raises(TypeError, match="str"):
        format_date("2026-02-10")  # type: ignore[arg-type]
