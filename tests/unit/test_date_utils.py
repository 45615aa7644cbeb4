"""Unit tests for date and year-month helpers"""

import pytest
from datetime import date
from flowsight_gateway.domain.exceptions import InvalidYearMonthError
from flowsight_gateway.utils.date_utils import (
    add_months,
    days_in_month,
    format_year_month,
    generate_date_range,
    month_dates,
    months_between,
    parse_year_month,
    previous_year_month,
)


def test_parse_year_month_valid():
    assert parse_year_month("2024-06") == (2024, 6)


@pytest.mark.parametrize(
    "value",
    [
        "202406",  # no dash
        "2024-06-15",  # too many parts
        "abc-06",  # invalid year
        "2024-abc",  # invalid month
        "2024-13",  # month out of range
        "",
    ],
)
def test_parse_year_month_invalid(value):
    with pytest.raises(InvalidYearMonthError):
        parse_year_month(value)


def test_add_months_crosses_year_boundaries():
    assert add_months(2024, 11, 2) == (2025, 1)
    assert add_months(2024, 1, -1) == (2023, 12)
    assert add_months(2024, 5, 0) == (2024, 5)
    assert add_months(2024, 1, 120) == (2034, 1)


def test_previous_year_month():
    assert previous_year_month("2024-06") == "2024-05"
    assert previous_year_month("2024-01") == "2023-12"


def test_format_year_month_pads():
    assert format_year_month(2024, 3) == "2024-03"


def test_months_between():
    assert months_between("2024-01", "2024-06") == 5
    assert months_between("2024-01", "2023-12") == -1
    assert months_between("2023-11", "2024-02") == 3


def test_month_dates_covers_whole_month():
    february = month_dates(2024, 2)

    assert len(february) == 29  # leap year
    assert february[0] == date(2024, 2, 1)
    assert february[-1] == date(2024, 2, 29)
    assert days_in_month(2023, 2) == 28


def test_generate_date_range_inclusive():
    days = generate_date_range(date(2024, 1, 30), date(2024, 2, 2))
    assert days == [date(2024, 1, 30), date(2024, 1, 31), date(2024, 2, 1), date(2024, 2, 2)]
