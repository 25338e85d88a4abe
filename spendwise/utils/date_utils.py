"""Date manipulation utilities"""

import calendar
from datetime import date, datetime, time
from typing import Tuple

# Period ends are reported with millisecond precision: 23:59:59.999
END_OF_DAY = time(23, 59, 59, 999_000)


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, END_OF_DAY)


def shift_month(year: int, month: int, months_back: int) -> Tuple[int, int]:
    """Step back a number of months from (year, month), rolling over years"""
    index = year * 12 + (month - 1) - months_back
    return index // 12, index % 12 + 1


def last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])
