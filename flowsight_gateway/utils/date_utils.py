"""Date and year-month manipulation utilities"""

import calendar
from datetime import date, timedelta
from typing import List, Tuple

from flowsight_gateway.domain.exceptions import InvalidYearMonthError


def generate_date_range(start: date, end: date) -> List[date]:
    """Generate list of dates from start to end (inclusive)"""
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(days)]


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_dates(year: int, month: int) -> List[date]:
    """Every calendar day of the month, day 1 first"""
    return generate_date_range(date(year, month, 1), date(year, month, days_in_month(year, month)))


def add_months(year: int, month: int, offset: int) -> Tuple[int, int]:
    """Shift a (year, month) pair by offset months; offset may be negative"""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def format_year_month(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def parse_year_month(value: str) -> Tuple[int, int]:
    """
    Parse a "YYYY-MM" string into (year, month).

    Raises:
        InvalidYearMonthError: Not exactly two dash-separated integers, or month outside 1-12
    """
    parts = (value or "").split("-")
    if len(parts) != 2:
        raise InvalidYearMonthError(f"Invalid year-month format: {value!r}")

    try:
        year = int(parts[0])
        month = int(parts[1])
    except ValueError as e:
        raise InvalidYearMonthError(f"Invalid year-month format: {value!r}") from e

    if not 1 <= month <= 12:
        raise InvalidYearMonthError(f"Month out of range in {value!r}")

    return year, month


def previous_year_month(year_month: str) -> str:
    """Calendar month immediately before year_month ("2024-01" -> "2023-12")"""
    year, month = parse_year_month(year_month)
    return format_year_month(*add_months(year, month, -1))


def months_between(start_year_month: str, target_year_month: str) -> int:
    """Whole months from start to target; negative when target precedes start"""
    start_year, start_month = parse_year_month(start_year_month)
    target_year, target_month = parse_year_month(target_year_month)
    return (target_year - start_year) * 12 + (target_month - start_month)
