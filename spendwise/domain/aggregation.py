"""Reduce expense snapshots into totals, category stats and need/want splits"""

from decimal import Decimal
from typing import Dict, Iterable, List, Sequence, Tuple
from spendwise.domain.models import Category, CategoryStats, Expense, ExpenseType, PeriodTotals

ZERO = Decimal("0")

# Position of each category in the fixed enumeration, used to break ties
_CATEGORY_ORDER = {category: index for index, category in enumerate(Category)}


def as_amount(value) -> Decimal:
    """Coerce a budget or amount given as int/float/str into a Decimal"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def total_spent(expenses: Iterable[Expense]) -> Decimal:
    return sum((e.amount for e in expenses), ZERO)


def needs_and_wants(expenses: Iterable[Expense]) -> Tuple[Decimal, Decimal]:
    """Return (needs_total, wants_total)"""
    needs_total = ZERO
    wants_total = ZERO
    for expense in expenses:
        if expense.expense_type == ExpenseType.NEED:
            needs_total += expense.amount
        else:
            wants_total += expense.amount
    return needs_total, wants_total


def percent_of(part: Decimal, whole: Decimal) -> float:
    """100 * part / whole, or 0.0 when whole is zero"""
    if whole == 0:
        return 0.0
    return float(part / whole * 100)


def aggregate(expenses: Sequence[Expense]) -> PeriodTotals:
    """
    Sum a period's expenses overall and per category.

    Only categories present in the input appear in the breakdown.
    """
    breakdown: Dict[Category, Decimal] = {}
    for expense in expenses:
        breakdown[expense.category] = breakdown.get(expense.category, ZERO) + expense.amount

    return PeriodTotals(total=total_spent(expenses), category_breakdown=breakdown)


def category_stats(expenses: Sequence[Expense]) -> List[CategoryStats]:
    """
    Build one CategoryStats per fixed category.

    Requirements:
    - Always five entries; categories without activity have total 0
    - total == needs_total + wants_total for every entry
    - percentage is the share of the overall total (0 when nothing was spent)
    - Sorted by total descending, ties in category enumeration order
    """
    overall = total_spent(expenses)

    stats = []
    for category in Category:
        in_category = [e for e in expenses if e.category == category]
        needs_total, wants_total = needs_and_wants(in_category)
        total = needs_total + wants_total

        stats.append(
            CategoryStats(
                category=category,
                total=total,
                percentage=percent_of(total, overall),
                count=len(in_category),
                needs_total=needs_total,
                wants_total=wants_total,
            )
        )

    return sorted(stats, key=lambda s: (-s.total, _CATEGORY_ORDER[s.category]))
