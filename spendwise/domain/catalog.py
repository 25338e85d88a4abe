"""Immutable lookup tables for badge metadata and category presentation"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping
from spendwise.domain.models import Category

DEFAULT_COLOR = "from-gray-400 to-gray-600"


@dataclass(frozen=True)
class BadgeDefinition:
    """Display metadata for one badge type"""

    name: str
    description: str
    requirement: str
    color: str = DEFAULT_COLOR


BUDGET_KEEPER = "budget_keeper"
SMART_SPENDER = "smart_spender"
TRACKING_CHAMPION = "tracking_champion"
SAVER_OF_WEEK = "saver_of_week"
SAVER_OF_MONTH = "saver_of_month"
SUPER_SAVER_WEEK = "super_saver_week"
SUPER_SAVER_MONTH = "super_saver_month"

BADGE_CATALOG: Mapping[str, BadgeDefinition] = MappingProxyType(
    {
        BUDGET_KEEPER: BadgeDefinition(
            name="Budget Keeper",
            description="Stayed within monthly budget",
            requirement="Keep spending under budget for a month",
            color="from-green-400 to-emerald-500",
        ),
        SMART_SPENDER: BadgeDefinition(
            name="Smart Spender",
            description="Prioritized needs over wants",
            requirement="Spend 60% or more on needs",
            color="from-blue-400 to-cyan-500",
        ),
        TRACKING_CHAMPION: BadgeDefinition(
            name="Tracking Champion",
            description="Logged 20+ expenses",
            requirement="Log 20 or more expenses in a month",
            color="from-yellow-400 to-orange-500",
        ),
        SAVER_OF_WEEK: BadgeDefinition(
            name="Saver of the Week",
            description="Reduced spending compared to last week",
            requirement="Spend no more than last week",
            color="from-teal-400 to-cyan-500",
        ),
        SAVER_OF_MONTH: BadgeDefinition(
            name="Saver of the Month",
            description="Reduced spending compared to last month",
            requirement="Spend no more than last month",
            color="from-blue-400 to-purple-500",
        ),
        SUPER_SAVER_WEEK: BadgeDefinition(
            name="Super Saver (Week)",
            description="Reduced spending by 20%+ this week",
            requirement="Cut weekly spending by 20% or more",
            color="from-orange-400 to-red-500",
        ),
        SUPER_SAVER_MONTH: BadgeDefinition(
            name="Super Saver (Month)",
            description="Reduced spending by 20%+ this month",
            requirement="Cut monthly spending by 20% or more",
            color="from-pink-400 to-purple-600",
        ),
    }
)

CATEGORY_COLORS: Mapping[Category, str] = MappingProxyType(
    {
        Category.FOOD: "from-orange-400 to-red-500",
        Category.SHOPPING: "from-pink-400 to-purple-500",
        Category.TRAVEL: "from-blue-400 to-cyan-500",
        Category.BILLS: "from-yellow-400 to-orange-500",
        Category.OTHER: DEFAULT_COLOR,
    }
)


def category_color(category: Category | str, colors: Mapping[Category, str] = CATEGORY_COLORS) -> str:
    """Gradient classes for a category, gray for anything unknown"""
    try:
        category = Category(category)
    except ValueError:
        return DEFAULT_COLOR
    return colors.get(category, DEFAULT_COLOR)


def badge_color(badge_type: str, catalog: Mapping[str, BadgeDefinition] = BADGE_CATALOG) -> str:
    definition = catalog.get(badge_type)
    return definition.color if definition else DEFAULT_COLOR
