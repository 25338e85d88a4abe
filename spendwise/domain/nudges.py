"""Advisory nudges generated from a month of spending"""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence
from spendwise.domain.models import Category, CategoryStats, Expense, ExpenseType
from spendwise.domain.aggregation import as_amount, needs_and_wants, percent_of, total_spent

MAX_NUDGES = 4
FALLBACK_NUDGE = "Great spending habits! Keep tracking your expenses to maintain financial awareness."
WANTS_OVER_HALF_NUDGE = "Over 50% of your spending is on wants. Small changes can lead to big savings!"

# Minimum wants spend in a category before it is called out
WANTS_CALLOUT_MINIMUM = Decimal("100")


def _whole(value) -> str:
    """Round half-up to a whole number for display"""
    return str(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _budget_nudge(total: Decimal, monthly_budget: Decimal) -> str | None:
    if monthly_budget <= 0:
        return None

    usage = percent_of(total, monthly_budget)
    if usage > 90:
        return (
            f"You've used {_whole(usage)}% of your monthly budget. "
            "Consider cutting back on non-essentials."
        )
    elif usage > 75:
        return f"You're at {_whole(usage)}% of your budget. Great job staying mindful!"
    return None


def _concentration_nudge(stats: CategoryStats) -> str:
    percentage = _whole(stats.percentage)
    if stats.category == Category.FOOD:
        return (
            f"Your food spending is {percentage}% of total expenses. "
            "Try meal planning to reduce dining out costs."
        )
    if stats.category == Category.SHOPPING:
        return (
            f"Shopping is taking up {percentage}% of your budget. "
            "Consider the 24-hour rule before purchasing."
        )
    return f"{stats.category.value} spending is high at {percentage}%. Look for ways to optimize these expenses."


def _wants_over_needs_nudge(stats: CategoryStats) -> str:
    return (
        f"In {stats.category.value}, you're spending more on wants "
        f"(${_whole(stats.wants_total)}) than needs. Try redirecting some to savings."
    )


def generate_nudges(
    expenses: Sequence[Expense],
    monthly_budget,
    category_stats: Sequence[CategoryStats],
) -> List[str]:
    """
    Produce up to four advisory messages, most important first.

    Rules, in priority order:
    1. Budget usage above 90% (warning) or above 75% (encouragement)
    2. Any category above 40% of total spending
    3. Any category where wants exceed needs and wants exceed $100
    4. Wants above half of all spending
    5. Fallback praise when nothing else fired

    Category rules walk categories in enumeration order, regardless of the
    order of `category_stats`.
    """
    nudges: List[str] = []
    total = total_spent(expenses)

    budget_nudge = _budget_nudge(total, as_amount(monthly_budget))
    if budget_nudge:
        nudges.append(budget_nudge)

    by_category = {s.category: s for s in category_stats}
    ordered = [by_category[c] for c in Category if c in by_category]

    for stats in ordered:
        if stats.percentage > 40 and stats.total > 0:
            nudges.append(_concentration_nudge(stats))

    for stats in ordered:
        if stats.wants_total > stats.needs_total and stats.wants_total > WANTS_CALLOUT_MINIMUM:
            nudges.append(_wants_over_needs_nudge(stats))

    _, wants_total = needs_and_wants(expenses)
    if total > 0 and wants_total > total * Decimal("0.5"):
        nudges.append(WANTS_OVER_HALF_NUDGE)

    if not nudges:
        nudges.append(FALLBACK_NUDGE)

    return nudges[:MAX_NUDGES]


def detect_impulsive_spending(expenses: Sequence[Expense], window: int = 5) -> bool:
    """
    Flag a burst of small discretionary purchases.

    True when at least three of the `window` most recent expenses are wants
    under $50.
    """
    recent = sorted(expenses, key=lambda e: (e.date, e.created_at or datetime.min), reverse=True)[:window]
    small_wants = [e for e in recent if e.expense_type == ExpenseType.WANT and e.amount < 50]
    return len(small_wants) >= 3
