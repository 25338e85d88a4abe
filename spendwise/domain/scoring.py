"""Smart Spend Score - additive penalty model over a month of expenses"""

from decimal import Decimal
from typing import Sequence
from spendwise.domain.models import Expense
from spendwise.domain.aggregation import as_amount, category_stats, needs_and_wants, percent_of, total_spent

BASE_SCORE = 100
CONCENTRATION_THRESHOLD = 40  # % of total in a single category
CONCENTRATION_PENALTY = 10


def budget_usage_penalty(total: Decimal, monthly_budget: Decimal) -> int:
    """
    Penalty for how much of the monthly budget has been used.

    Only the highest matching tier applies:
    - >100%: -30 (over budget)
    - >90%:  -20
    - >80%:  -10
    """
    if monthly_budget <= 0:
        return 0

    usage = percent_of(total, monthly_budget)
    if usage > 100:
        return 30
    elif usage > 90:
        return 20
    elif usage > 80:
        return 10
    return 0


def wants_ratio_penalty(total: Decimal, wants_total: Decimal) -> int:
    """Penalty for discretionary share of spending: >60% -20, >40% -10"""
    if total <= 0:
        return 0

    wants_share = percent_of(wants_total, total)
    if wants_share > 60:
        return 20
    elif wants_share > 40:
        return 10
    return 0


def growth_penalty(total: Decimal, previous_total: Decimal) -> int:
    """Penalty for month-over-month increase: >30% -15, >20% -10"""
    if previous_total <= 0:
        return 0

    increase = percent_of(total - previous_total, previous_total)
    if increase > 30:
        return 15
    elif increase > 20:
        return 10
    return 0


def smart_spend_score(
    expenses: Sequence[Expense],
    monthly_budget,
    previous_month_expenses: Sequence[Expense] = (),
) -> int:
    """
    Calculate the Smart Spend Score from 0 (worst) to 100 (best).

    Starts from 100 and subtracts:
    - budget usage penalty (only with a positive budget)
    - wants ratio penalty
    - 10 for every category holding more than 40% of spending (no cap)
    - month-over-month growth penalty (only with previous month data)

    Penalties are summed first, then the result is clamped to [0, 100].
    An empty month scores 100: absence of data is not penalised.
    """
    if not expenses:
        return BASE_SCORE

    total = total_spent(expenses)
    _, wants_total = needs_and_wants(expenses)

    score = BASE_SCORE
    score -= budget_usage_penalty(total, as_amount(monthly_budget))
    score -= wants_ratio_penalty(total, wants_total)

    concentrated = [s for s in category_stats(expenses) if s.percentage > CONCENTRATION_THRESHOLD]
    score -= len(concentrated) * CONCENTRATION_PENALTY

    if previous_month_expenses:
        score -= growth_penalty(total, total_spent(previous_month_expenses))

    return max(0, min(BASE_SCORE, score))


def score_band(score: int) -> str:
    """
    Map a score to the label shown next to it.

    - 80+:   Excellent
    - 60-79: Good
    - 40-59: Fair
    - <40:   Needs Improvement
    """
    if score >= 80:
        return "Excellent"
    elif score >= 60:
        return "Good"
    elif score >= 40:
        return "Fair"
    else:
        return "Needs Improvement"
