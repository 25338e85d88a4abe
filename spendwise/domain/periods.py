"""Calendar-aligned week and month boundaries relative to a reference day"""

from datetime import date, timedelta
from spendwise.domain.models import PeriodKind, PeriodRange
from spendwise.utils.date_utils import end_of_day, last_day_of_month, shift_month, start_of_day


def _check_offset(offset: int) -> None:
    if offset < 0:
        raise ValueError(f"Period offset must be non-negative, got {offset}")


def week_range(weeks_ago: int = 0, today: date | None = None) -> PeriodRange:
    """
    Monday 00:00:00.000 through Sunday 23:59:59.999 of the week that is
    `weeks_ago` full weeks before the week containing `today`.

    Weeks start on Monday (ISO). A Sunday belongs to the week ending that day.
    """
    _check_offset(weeks_ago)
    if today is None:
        today = date.today()

    # weekday(): Monday=0 ... Sunday=6
    monday = today - timedelta(days=today.weekday() + weeks_ago * 7)
    sunday = monday + timedelta(days=6)

    return PeriodRange(start=start_of_day(monday), end=end_of_day(sunday))


def month_range(months_ago: int = 0, today: date | None = None) -> PeriodRange:
    """
    First day 00:00:00.000 through last day 23:59:59.999 of the month that is
    `months_ago` months before the month containing `today`.

    Example:
        months_ago=1 on 2024-01-15 → 2023-12-01 .. 2023-12-31
    """
    _check_offset(months_ago)
    if today is None:
        today = date.today()

    year, month = shift_month(today.year, today.month, months_ago)

    return PeriodRange(
        start=start_of_day(date(year, month, 1)),
        end=end_of_day(last_day_of_month(year, month)),
    )


def period_range(kind: PeriodKind, periods_ago: int = 0, today: date | None = None) -> PeriodRange:
    """Resolve a week or month range by kind"""
    if kind == PeriodKind.WEEK:
        return week_range(periods_ago, today)
    return month_range(periods_ago, today)
