"""Savings goal progress"""

from decimal import Decimal
from spendwise.domain.models import Goal, GoalProgress
from spendwise.domain.aggregation import ZERO, percent_of


def progress_tier(percentage: float) -> str:
    """
    Bucket progress for display:
    - 100+:  complete
    - 75-99: almost
    - 50-74: halfway
    - <50:   started
    """
    if percentage >= 100:
        return "complete"
    elif percentage >= 75:
        return "almost"
    elif percentage >= 50:
        return "halfway"
    else:
        return "started"


def goal_progress(goal: Goal) -> GoalProgress:
    """Progress toward a goal; a zero target reports 0% rather than failing"""
    percentage = percent_of(goal.current_amount, goal.target_amount)
    remaining = max(goal.target_amount - goal.current_amount, ZERO)

    return GoalProgress(
        percentage=percentage,
        remaining=remaining,
        completed=goal.target_amount > 0 and goal.current_amount >= goal.target_amount,
        tier=progress_tier(percentage),
    )


def add_contribution(goal: Goal, amount: Decimal) -> Decimal:
    """New saved amount after a contribution, never below zero"""
    return max(goal.current_amount + amount, ZERO)
