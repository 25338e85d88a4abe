"""Unit tests for period-over-period comparison"""

from datetime import date
from decimal import Decimal
from spendwise.domain.models import Category, PeriodKind
from spendwise.domain.comparison import compare_monthly, compare_periods, compare_weekly

WEDNESDAY = date(2024, 5, 15)


def test_spending_drop_is_improvement(expense):
    """current 80 vs previous 100 → -20, -20%, improvement"""
    comparison = compare_weekly(
        [expense("Food", 80)],
        [expense("Food", 100)],
        today=WEDNESDAY,
    )

    assert comparison.current_period.total == Decimal("80")
    assert comparison.previous_period.total == Decimal("100")
    assert comparison.changes.total_change == Decimal("-20")
    assert comparison.changes.total_change_percent == -20.0
    assert comparison.improvement is True


def test_spending_increase_is_not_improvement(expense):
    comparison = compare_monthly([expense("Bills", 150)], [expense("Bills", 100)], today=WEDNESDAY)

    assert comparison.changes.total_change == Decimal("50")
    assert comparison.changes.total_change_percent == 50.0
    assert comparison.improvement is False


def test_no_previous_spending_gives_zero_percent(expense):
    comparison = compare_weekly([expense("Food", 40)], [], today=WEDNESDAY)

    assert comparison.changes.total_change == Decimal("40")
    assert comparison.changes.total_change_percent == 0
    assert comparison.improvement is False


def test_category_changes_cover_union_of_active_categories(expense):
    comparison = compare_weekly(
        [expense("Food", 50), expense("Bills", 30)],
        [expense("Travel", 30), expense("Bills", 60)],
        today=WEDNESDAY,
    )
    changes = comparison.changes.category_changes

    assert set(changes) == {Category.FOOD, Category.TRAVEL, Category.BILLS}
    assert changes[Category.FOOD].amount == Decimal("50")
    assert changes[Category.FOOD].percent == 0  # nothing to compare against
    assert changes[Category.TRAVEL].amount == Decimal("-30")
    assert changes[Category.TRAVEL].percent == -100.0
    assert changes[Category.BILLS].amount == Decimal("-30")
    assert changes[Category.BILLS].percent == -50.0


def test_breakdowns_omit_inactive_categories(expense):
    comparison = compare_weekly([expense("Food", 10)], [], today=WEDNESDAY)

    assert comparison.current_period.category_breakdown == {Category.FOOD: Decimal("10")}
    assert comparison.previous_period.category_breakdown == {}
    assert comparison.changes.category_changes[Category.FOOD].amount == Decimal("10")


def test_swapping_periods_negates_change(expense):
    current = [expense("Food", 80), expense("Other", 15)]
    previous = [expense("Food", 100)]

    forward = compare_weekly(current, previous, today=WEDNESDAY)
    backward = compare_weekly(previous, current, today=WEDNESDAY)

    assert forward.changes.total_change == -backward.changes.total_change
    assert forward.improvement is True
    assert backward.improvement is False


def test_flat_spending_is_improvement_in_both_directions(expense):
    """Zero change counts as improvement whichever side is 'current'"""
    a = [expense("Food", 60), expense("Bills", 40)]
    b = [expense("Shopping", 100)]

    forward = compare_weekly(a, b, today=WEDNESDAY)
    backward = compare_weekly(b, a, today=WEDNESDAY)

    assert forward.changes.total_change == 0
    assert backward.changes.total_change == 0
    assert forward.improvement is True
    assert backward.improvement is True
    assert forward.changes.total_change_percent == 0


def test_weekly_period_bounds():
    comparison = compare_periods([], [], PeriodKind.WEEK, today=WEDNESDAY)

    assert comparison.kind == PeriodKind.WEEK
    assert comparison.current_period.start == date(2024, 5, 13)
    assert comparison.current_period.end == date(2024, 5, 19)
    assert comparison.previous_period.start == date(2024, 5, 6)
    assert comparison.previous_period.end == date(2024, 5, 12)


def test_monthly_period_bounds_roll_over_year():
    comparison = compare_periods([], [], "month", today=date(2025, 1, 8))

    assert comparison.kind == PeriodKind.MONTH
    assert comparison.current_period.start == date(2025, 1, 1)
    assert comparison.current_period.end == date(2025, 1, 31)
    assert comparison.previous_period.start == date(2024, 12, 1)
    assert comparison.previous_period.end == date(2024, 12, 31)


def test_empty_periods():
    comparison = compare_monthly([], [], today=WEDNESDAY)

    assert comparison.changes.total_change == 0
    assert comparison.changes.total_change_percent == 0
    assert comparison.changes.category_changes == {}
    assert comparison.improvement is True
