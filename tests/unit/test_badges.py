"""Unit tests for badge eligibility and reward points"""

from datetime import date
from spendwise.domain.models import BadgeAward, Category
from spendwise.domain.badges import (
    activity_badges,
    comparison_badges,
    evaluate_badges,
    reward_summary,
)
from spendwise.domain.catalog import BADGE_CATALOG, BadgeDefinition, badge_color, category_color
from spendwise.domain.comparison import compare_monthly, compare_weekly

WEDNESDAY = date(2024, 5, 15)

ALL_TYPES = frozenset(BADGE_CATALOG)


def types(awards):
    return [a.type for a in awards]


def test_budget_keeper_within_budget(even_month):
    awards = activity_badges(even_month, 100, set())

    assert "budget_keeper" in types(awards)
    budget_keeper = awards[0]
    assert budget_keeper.name == "Budget Keeper"
    assert budget_keeper.description == "Stayed within monthly budget"


def test_budget_keeper_requires_a_budget(even_month):
    assert "budget_keeper" not in types(activity_badges(even_month, 0, set()))
    assert "budget_keeper" not in types(activity_badges(even_month, 99, set()))


def test_budget_keeper_with_no_spending():
    assert types(activity_badges([], 500, set())) == ["budget_keeper"]


def test_smart_spender_needs_over_60_percent(expense):
    mostly_needs = [expense("Bills", 61), expense("Shopping", 39, "want")]
    assert "smart_spender" in types(activity_badges(mostly_needs, 0, set()))

    exactly_60 = [expense("Bills", 60), expense("Shopping", 40, "want")]
    assert "smart_spender" not in types(activity_badges(exactly_60, 0, set()))


def test_smart_spender_not_awarded_on_zero_spend(expense):
    assert activity_badges([], 0, set()) == []
    assert activity_badges([expense("Food", 0)], 0, set()) == []


def test_tracking_champion_at_20_expenses(expense):
    nineteen = [expense("Food", 1, "want") for _ in range(19)]
    assert "tracking_champion" not in types(activity_badges(nineteen, 0, set()))

    twenty = nineteen + [expense("Food", 1, "want")]
    assert types(activity_badges(twenty, 0, set())) == ["tracking_champion"]


def test_activity_badges_can_all_fire_together(expense):
    expenses = [expense(c, 5) for c in Category] * 4

    assert types(activity_badges(expenses, 1000, set())) == [
        "budget_keeper",
        "smart_spender",
        "tracking_champion",
    ]


def test_activity_badges_never_reoffered(expense):
    expenses = [expense(c, 5) for c in Category] * 4

    assert activity_badges(expenses, 1000, ALL_TYPES) == []
    assert types(activity_badges(expenses, 1000, {"smart_spender"})) == ["budget_keeper", "tracking_champion"]


def test_saver_badges_on_reduced_spending(expense):
    weekly = compare_weekly([expense("Food", 90)], [expense("Food", 100)], today=WEDNESDAY)
    monthly = compare_monthly([expense("Food", 90)], [expense("Food", 100)], today=WEDNESDAY)

    assert types(comparison_badges(weekly, monthly, set())) == ["saver_of_week", "saver_of_month"]


def test_super_saver_at_20_percent_reduction(expense):
    weekly = compare_weekly([expense("Food", 75)], [expense("Food", 100)], today=WEDNESDAY)
    monthly = compare_monthly([expense("Food", 80)], [expense("Food", 100)], today=WEDNESDAY)

    awards = comparison_badges(weekly, monthly, set())

    assert types(awards) == ["saver_of_week", "saver_of_month", "super_saver_week", "super_saver_month"]
    by_type = {a.type: a for a in awards}
    assert by_type["super_saver_week"].name == "Super Saver (Week)"
    assert by_type["super_saver_week"].description == "Reduced spending by 25% this week"
    assert by_type["super_saver_month"].description == "Reduced spending by 20% this month"


def test_increase_earns_nothing(expense):
    weekly = compare_weekly([expense("Food", 200)], [expense("Food", 100)], today=WEDNESDAY)
    monthly = compare_monthly([expense("Food", 200)], [expense("Food", 100)], today=WEDNESDAY)

    assert comparison_badges(weekly, monthly, set()) == []


def test_flat_spending_earns_saver_but_not_super_saver(expense):
    weekly = compare_weekly([expense("Food", 100)], [expense("Food", 100)], today=WEDNESDAY)
    monthly = compare_monthly([expense("Food", 120)], [expense("Food", 100)], today=WEDNESDAY)

    assert types(comparison_badges(weekly, monthly, set())) == ["saver_of_week"]


def test_no_previous_spending_earns_nothing():
    weekly = compare_weekly([], [], today=WEDNESDAY)
    monthly = compare_monthly([], [], today=WEDNESDAY)

    assert weekly.improvement is True
    assert comparison_badges(weekly, monthly, set()) == []


def test_comparison_badges_never_reoffered(expense):
    weekly = compare_weekly([expense("Food", 10)], [expense("Food", 100)], today=WEDNESDAY)
    monthly = compare_monthly([expense("Food", 10)], [expense("Food", 100)], today=WEDNESDAY)

    assert comparison_badges(weekly, monthly, ALL_TYPES) == []
    assert types(comparison_badges(weekly, monthly, {"saver_of_week", "super_saver_month"})) == [
        "saver_of_month",
        "super_saver_week",
    ]


def test_custom_catalog_is_used(even_month):
    catalog = {
        **BADGE_CATALOG,
        "budget_keeper": BadgeDefinition(name="On Budget", description="Under budget", requirement="-"),
    }

    awards = activity_badges(even_month, 100, set(), catalog=catalog)

    assert awards[0] == BadgeAward(type="budget_keeper", name="On Budget", description="Under budget")


def test_evaluate_badges_returns_authoritative_set():
    new = [
        BadgeAward("saver_of_week", "Saver of the Week", "Reduced spending compared to last week"),
        BadgeAward("budget_keeper", "Budget Keeper", "Stayed within monthly budget"),
        BadgeAward("saver_of_week", "Saver of the Week", "Reduced spending compared to last week"),
    ]

    evaluation = evaluate_badges(new, {"budget_keeper", "tracking_champion"})

    assert types(evaluation.new_badges) == ["saver_of_week"]
    assert evaluation.earned_types == {"budget_keeper", "tracking_champion", "saver_of_week"}


def test_reward_summary():
    summary = reward_summary(badge_count=2, expense_count=10)

    assert summary.points == 250
    assert summary.level == 1
    assert summary.points_to_next_level == 250
    assert summary.level_progress_percent == 50.0

    levelled = reward_summary(badge_count=5, expense_count=0)
    assert levelled.points == 500
    assert levelled.level == 2
    assert levelled.points_to_next_level == 500
    assert levelled.level_progress_percent == 0.0


def test_catalog_lookups_fall_back_to_gray():
    assert category_color(Category.FOOD) == "from-orange-400 to-red-500"
    assert category_color("Travel") == "from-blue-400 to-cyan-500"
    assert category_color("Groceries") == "from-gray-400 to-gray-600"
    assert badge_color("saver_of_week") == "from-teal-400 to-cyan-500"
    assert badge_color("unknown") == "from-gray-400 to-gray-600"
