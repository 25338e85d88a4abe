"""Period-over-period spending comparison (week vs week, month vs month)"""

from datetime import date
from typing import Dict, Sequence
from spendwise.domain.models import (
    Category,
    CategoryChange,
    Expense,
    PeriodChanges,
    PeriodComparison,
    PeriodKind,
    PeriodRange,
    PeriodSummary,
    PeriodTotals,
)
from spendwise.domain.aggregation import ZERO, aggregate, percent_of
from spendwise.domain.periods import period_range


def _summary(period: PeriodRange, totals: PeriodTotals) -> PeriodSummary:
    return PeriodSummary(
        start=period.start_date,
        end=period.end_date,
        total=totals.total,
        category_breakdown=totals.category_breakdown,
    )


def _category_changes(current: PeriodTotals, previous: PeriodTotals) -> Dict[Category, CategoryChange]:
    """Changes for every category with activity on either side"""
    seen = set(current.category_breakdown) | set(previous.category_breakdown)

    changes = {}
    for category in Category:
        if category not in seen:
            continue
        now = current.category_breakdown.get(category, ZERO)
        before = previous.category_breakdown.get(category, ZERO)
        amount = now - before
        changes[category] = CategoryChange(amount=amount, percent=percent_of(amount, before))

    return changes


def compare_periods(
    current_expenses: Sequence[Expense],
    previous_expenses: Sequence[Expense],
    kind: PeriodKind,
    today: date | None = None,
) -> PeriodComparison:
    """
    Compare the current week/month against the one before it.

    Requirements:
    - Period bounds come from the calendar (offsets 0 and 1 from `today`)
    - Percent changes are 0 when the previous amount is 0
    - improvement is total_change <= 0, so flat spending counts as improving

    Callers are expected to have already filtered each expense list to its
    period; expenses are not re-filtered here.
    """
    kind = PeriodKind(kind)
    current_range = period_range(kind, 0, today)
    previous_range = period_range(kind, 1, today)

    current = aggregate(current_expenses)
    previous = aggregate(previous_expenses)

    total_change = current.total - previous.total

    return PeriodComparison(
        kind=kind,
        current_period=_summary(current_range, current),
        previous_period=_summary(previous_range, previous),
        changes=PeriodChanges(
            total_change=total_change,
            total_change_percent=percent_of(total_change, previous.total),
            category_changes=_category_changes(current, previous),
        ),
        improvement=total_change <= 0,
    )


def compare_weekly(
    current_week_expenses: Sequence[Expense],
    previous_week_expenses: Sequence[Expense],
    today: date | None = None,
) -> PeriodComparison:
    return compare_periods(current_week_expenses, previous_week_expenses, PeriodKind.WEEK, today)


def compare_monthly(
    current_month_expenses: Sequence[Expense],
    previous_month_expenses: Sequence[Expense],
    today: date | None = None,
) -> PeriodComparison:
    return compare_periods(current_month_expenses, previous_month_expenses, PeriodKind.MONTH, today)
