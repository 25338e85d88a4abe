"""Domain models - pure Python dataclasses representing spending entities"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Dict, FrozenSet, List, Optional


class Category(str, Enum):
    """Fixed expense categories, in display and tie-break order"""

    FOOD = "Food"
    SHOPPING = "Shopping"
    TRAVEL = "Travel"
    BILLS = "Bills"
    OTHER = "Other"


class ExpenseType(str, Enum):
    """User-assigned classification of an expense"""

    NEED = "need"
    WANT = "want"


class PeriodKind(str, Enum):
    """Calendar period used for comparisons"""

    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class Expense:
    """Immutable snapshot of a logged expense"""

    amount: Decimal
    category: Category
    expense_type: ExpenseType
    date: date
    id: Optional[str] = None
    item_name: str = ""
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass
class CategoryStats:
    """Per-category totals for a set of expenses"""

    category: Category
    total: Decimal
    percentage: float
    count: int
    needs_total: Decimal
    wants_total: Decimal


@dataclass
class PeriodTotals:
    """Overall total plus the breakdown of categories that had activity"""

    total: Decimal
    category_breakdown: Dict[Category, Decimal]


@dataclass(frozen=True)
class PeriodRange:
    """Inclusive datetime bounds of a calendar week or month"""

    start: datetime
    end: datetime

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        return self.end.date()


@dataclass
class PeriodSummary:
    """One side of a period comparison"""

    start: date
    end: date
    total: Decimal
    category_breakdown: Dict[Category, Decimal]


@dataclass
class CategoryChange:
    amount: Decimal
    percent: float


@dataclass
class PeriodChanges:
    total_change: Decimal
    total_change_percent: float
    category_changes: Dict[Category, CategoryChange]


@dataclass
class PeriodComparison:
    """Output of comparing the current period against the previous one"""

    kind: PeriodKind
    current_period: PeriodSummary
    previous_period: PeriodSummary
    changes: PeriodChanges
    improvement: bool


@dataclass(frozen=True)
class BadgeAward:
    """Achievement a user has become eligible for"""

    type: str
    name: str
    description: str


@dataclass
class BadgeEvaluation:
    """Newly eligible badges plus the complete set of earned types"""

    new_badges: List[BadgeAward]
    earned_types: FrozenSet[str] = field(default_factory=frozenset)


@dataclass
class RewardSummary:
    """Points and level derived from badges and logging activity"""

    points: int
    level: int
    points_to_next_level: int
    level_progress_percent: float


@dataclass
class Goal:
    """Savings goal"""

    title: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0")
    deadline: Optional[date] = None
    id: Optional[str] = None


@dataclass
class GoalProgress:
    percentage: float
    remaining: Decimal
    completed: bool
    tier: str
