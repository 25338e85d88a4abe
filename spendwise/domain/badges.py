"""Badge eligibility rules and reward points"""

from decimal import Decimal, ROUND_HALF_UP
from typing import AbstractSet, Iterable, List, Mapping, Sequence
from spendwise.domain.models import BadgeAward, BadgeEvaluation, Expense, PeriodComparison, RewardSummary
from spendwise.domain.aggregation import as_amount, needs_and_wants, total_spent
from spendwise.domain.catalog import (
    BADGE_CATALOG,
    BUDGET_KEEPER,
    SAVER_OF_MONTH,
    SAVER_OF_WEEK,
    SMART_SPENDER,
    SUPER_SAVER_MONTH,
    SUPER_SAVER_WEEK,
    TRACKING_CHAMPION,
    BadgeDefinition,
)

SMART_SPENDER_NEEDS_SHARE = Decimal("0.6")
TRACKING_CHAMPION_MIN_EXPENSES = 20
SUPER_SAVER_MIN_REDUCTION = 20  # percent

POINTS_PER_BADGE = 100
POINTS_PER_EXPENSE = 5
POINTS_PER_LEVEL = 500


def _award(
    badge_type: str,
    catalog: Mapping[str, BadgeDefinition],
    description: str | None = None,
) -> BadgeAward:
    definition = catalog[badge_type]
    return BadgeAward(
        type=badge_type,
        name=definition.name,
        description=description or definition.description,
    )


def activity_badges(
    expenses: Sequence[Expense],
    monthly_budget,
    earned_types: AbstractSet[str],
    catalog: Mapping[str, BadgeDefinition] = BADGE_CATALOG,
) -> List[BadgeAward]:
    """
    Badges earned from the current month's activity.

    - budget_keeper: a positive budget that total spending does not exceed
    - smart_spender: needs make up more than 60% of spending (never on zero spend)
    - tracking_champion: 20 or more expenses logged

    Types already in `earned_types` are never offered again.
    """
    awards: List[BadgeAward] = []
    total = total_spent(expenses)
    budget = as_amount(monthly_budget)
    needs_total, _ = needs_and_wants(expenses)

    if BUDGET_KEEPER not in earned_types and budget > 0 and total <= budget:
        awards.append(_award(BUDGET_KEEPER, catalog))

    if SMART_SPENDER not in earned_types and total > 0 and needs_total > total * SMART_SPENDER_NEEDS_SHARE:
        awards.append(_award(SMART_SPENDER, catalog))

    if TRACKING_CHAMPION not in earned_types and len(expenses) >= TRACKING_CHAMPION_MIN_EXPENSES:
        awards.append(_award(TRACKING_CHAMPION, catalog))

    return awards


def _reduction_description(reduction: float, period: str) -> str:
    rounded = Decimal(str(reduction)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"Reduced spending by {rounded}% this {period}"


def comparison_badges(
    weekly: PeriodComparison,
    monthly: PeriodComparison,
    earned_types: AbstractSet[str],
    catalog: Mapping[str, BadgeDefinition] = BADGE_CATALOG,
) -> List[BadgeAward]:
    """
    Badges earned by spending less than the previous week or month.

    - saver_of_week / saver_of_month: improvement over a period with spending
    - super_saver_week / super_saver_month: improvement of at least 20%

    Flat spending counts as improvement, so an unchanged non-zero week still
    earns saver_of_week.
    """
    awards: List[BadgeAward] = []

    if SAVER_OF_WEEK not in earned_types and weekly.improvement and weekly.previous_period.total > 0:
        awards.append(_award(SAVER_OF_WEEK, catalog))

    if SAVER_OF_MONTH not in earned_types and monthly.improvement and monthly.previous_period.total > 0:
        awards.append(_award(SAVER_OF_MONTH, catalog))

    weekly_reduction = abs(weekly.changes.total_change_percent)
    if (
        SUPER_SAVER_WEEK not in earned_types
        and weekly.improvement
        and weekly_reduction >= SUPER_SAVER_MIN_REDUCTION
    ):
        awards.append(_award(SUPER_SAVER_WEEK, catalog, _reduction_description(weekly_reduction, "week")))

    monthly_reduction = abs(monthly.changes.total_change_percent)
    if (
        SUPER_SAVER_MONTH not in earned_types
        and monthly.improvement
        and monthly_reduction >= SUPER_SAVER_MIN_REDUCTION
    ):
        awards.append(_award(SUPER_SAVER_MONTH, catalog, _reduction_description(monthly_reduction, "month")))

    return awards


def evaluate_badges(new_badges: Iterable[BadgeAward], earned_types: AbstractSet[str]) -> BadgeEvaluation:
    """
    Combine eligibility results with what the user already holds.

    The returned earned_types is the authoritative set after the new badges
    are persisted, so callers do not need to query the store again.
    """
    fresh = []
    seen = set(earned_types)
    for badge in new_badges:
        if badge.type in seen:
            continue
        seen.add(badge.type)
        fresh.append(badge)

    return BadgeEvaluation(new_badges=fresh, earned_types=frozenset(seen))


def reward_summary(badge_count: int, expense_count: int) -> RewardSummary:
    """
    Points: 100 per badge plus 5 per logged expense.
    Every 500 points is one level, starting at level 1.
    """
    points = badge_count * POINTS_PER_BADGE + expense_count * POINTS_PER_EXPENSE
    into_level = points % POINTS_PER_LEVEL

    return RewardSummary(
        points=points,
        level=points // POINTS_PER_LEVEL + 1,
        points_to_next_level=POINTS_PER_LEVEL - into_level,
        level_progress_percent=into_level * 100 / POINTS_PER_LEVEL,
    )
