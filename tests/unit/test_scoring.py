"""Unit tests for Smart Spend Score"""

import pytest
from decimal import Decimal
from spendwise.domain.models import Category
from spendwise.domain.scoring import (
    budget_usage_penalty,
    growth_penalty,
    score_band,
    smart_spend_score,
    wants_ratio_penalty,
)


def test_empty_month_scores_100(expense):
    """No penalties apply to absence of data"""
    assert smart_spend_score([], 0, []) == 100
    assert smart_spend_score([], 10, [expense("Food", 1000)]) == 100


def test_worked_example(expense):
    """
    Food 50 need + Food 150 want, budget 100:
    budget 200% → -30, wants 75% → -20, Food 100% of total → -10
    """
    expenses = [expense("Food", 50, "need"), expense("Food", 150, "want")]

    assert smart_spend_score(expenses, 100, []) == 40


def test_even_spending_under_budget_is_perfect(even_month):
    assert smart_spend_score(even_month, 1000, []) == 100


@pytest.mark.parametrize(
    "budget,expected",
    [
        (0, 100),  # no budget, no penalty
        (200, 100),  # 50%
        (120, 90),  # 83% → -10
        (100, 80),  # exactly 100% → -20
        (95, 70),  # 105% → -30
    ],
)
def test_budget_usage_tiers(even_month, budget, expected):
    # even_month totals 100, all needs, no category above 40%
    assert smart_spend_score(even_month, budget, []) == expected


def test_wants_ratio_tiers(expense):
    categories = list(Category)

    three_wants = [expense(c, 20, "want" if i < 3 else "need") for i, c in enumerate(categories)]
    assert smart_spend_score(three_wants, 0, []) == 90  # exactly 60% → -10

    four_wants = [expense(c, 20, "want" if i < 4 else "need") for i, c in enumerate(categories)]
    assert smart_spend_score(four_wants, 0, []) == 80  # 80% → -20

    two_wants = [expense(c, 20, "want" if i < 2 else "need") for i, c in enumerate(categories)]
    assert smart_spend_score(two_wants, 0, []) == 100  # exactly 40% → no penalty


def test_every_concentrated_category_costs_10(expense):
    expenses = [
        expense("Food", 45),
        expense("Shopping", 45),
        expense("Travel", 10),
    ]

    assert smart_spend_score(expenses, 0, []) == 80


def test_exactly_40_percent_is_not_concentrated(expense):
    expenses = [
        expense("Food", 40),
        expense("Shopping", 30),
        expense("Travel", 30),
    ]

    assert smart_spend_score(expenses, 0, []) == 100


@pytest.mark.parametrize(
    "previous_total,expected",
    [
        (75, 85),  # +33% → -15
        (80, 90),  # +25% → -10
        (90, 100),  # +11% → no penalty
        (200, 100),  # spending dropped
    ],
)
def test_month_over_month_growth(even_month, expense, previous_total, expected):
    previous = [expense("Bills", previous_total)]

    assert smart_spend_score(even_month, 0, previous) == expected


def test_previous_month_with_zero_total_has_no_growth_penalty(even_month, expense):
    assert smart_spend_score(even_month, 0, [expense("Food", 0)]) == 100


def test_all_penalties_combined(expense):
    """-30 budget, -20 wants, -20 concentration, -15 growth"""
    expenses = [expense("Food", 500, "want"), expense("Shopping", 500, "want")]
    previous = [expense("Food", 100)]

    assert smart_spend_score(expenses, 100, previous) == 15


def test_score_always_within_bounds(expense):
    scenarios = [
        ([expense("Food", 1)], 0, []),
        ([expense("Food", 10_000, "want")], 1, [expense("Food", 1)]),
        ([expense("Shopping", 60, "want"), expense("Bills", 40)], 50, [expense("Bills", 10)]),
        ([expense(c, 1000, "want") for c in Category], 10, [expense("Other", 5)]),
    ]
    for expenses, budget, previous in scenarios:
        assert 0 <= smart_spend_score(expenses, budget, previous) <= 100


def test_budget_accepts_float_and_decimal(even_month):
    assert smart_spend_score(even_month, 95.0, []) == 70
    assert smart_spend_score(even_month, Decimal("95"), []) == 70


def test_penalty_helpers_guard_zero_denominators():
    assert budget_usage_penalty(Decimal("50"), Decimal("0")) == 0
    assert wants_ratio_penalty(Decimal("0"), Decimal("0")) == 0
    assert growth_penalty(Decimal("50"), Decimal("0")) == 0


def test_score_band_boundaries():
    assert score_band(100) == "Excellent"
    assert score_band(80) == "Excellent"
    assert score_band(79) == "Good"
    assert score_band(60) == "Good"
    assert score_band(59) == "Fair"
    assert score_band(40) == "Fair"
    assert score_band(39) == "Needs Improvement"
    assert score_band(0) == "Needs Improvement"
