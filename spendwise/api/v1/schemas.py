"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import date, datetime
from decimal import Decimal
from typing import Dict, List, Literal, Optional

from spendwise.domain.models import Category, ExpenseType, PeriodKind


class ProfileUpdate(BaseModel):
    """Request body for PUT /v1/profile"""

    name: Optional[str] = Field(None, max_length=200)
    monthly_budget: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    monthly_budget: Decimal


class ExpenseCreate(BaseModel):
    """Request body for POST /v1/expenses"""

    item_name: str = Field(..., min_length=1, max_length=200)
    amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    category: Category
    expense_type: ExpenseType
    date: date


class ExpenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    item_name: str
    amount: Decimal
    category: Category
    expense_type: ExpenseType
    date: date
    category_color: str


class ExpenseListResponse(BaseModel):
    """Response for GET /v1/expenses"""

    expenses: List[ExpenseResponse]
    count: int
    total: Decimal
    impulsive_spending: bool


class CategoryStatsSchema(BaseModel):
    category: Category
    total: Decimal
    percentage: float
    count: int
    needs_total: Decimal
    wants_total: Decimal
    color: str


class NudgeSchema(BaseModel):
    id: str
    message: str
    is_read: bool
    created_at: Optional[datetime] = None


class BadgeSchema(BaseModel):
    """Earned badge as stored"""

    type: str
    name: str
    description: Optional[str] = None
    color: str
    earned_at: Optional[datetime] = None


class BadgeAwardSchema(BaseModel):
    """Badge newly earned during this request"""

    type: str
    name: str
    description: str


class DashboardResponse(BaseModel):
    """Response for GET /v1/dashboard"""

    period_start: date
    period_end: date
    total_spent: Decimal
    monthly_budget: Decimal
    remaining_budget: Decimal
    smart_spend_score: int
    score_band: str
    category_stats: List[CategoryStatsSchema]
    generated_nudges: List[str]
    recent_nudges: List[NudgeSchema]
    badges: List[BadgeSchema]


class CategoryChangeSchema(BaseModel):
    amount: Decimal
    percent: float


class PeriodSummarySchema(BaseModel):
    start: date
    end: date
    total: Decimal
    category_breakdown: Dict[str, Decimal]


class ChangesSchema(BaseModel):
    total_change: Decimal
    total_change_percent: float
    category_changes: Dict[str, CategoryChangeSchema]


class ComparisonSchema(BaseModel):
    kind: PeriodKind
    current_period: PeriodSummarySchema
    previous_period: PeriodSummarySchema
    changes: ChangesSchema
    improvement: bool


class InsightsResponse(BaseModel):
    """Response for GET /v1/insights"""

    weekly: ComparisonSchema
    monthly: ComparisonSchema
    new_badges: List[BadgeAwardSchema]


class RewardsResponse(BaseModel):
    """Response for GET /v1/rewards"""

    points: int
    level: int
    points_to_next_level: int
    level_progress_percent: float
    badges: List[BadgeSchema]
    new_badges: List[BadgeAwardSchema]


class GoalCreate(BaseModel):
    """Request body for POST /v1/goals"""

    title: str = Field(..., min_length=1, max_length=200)
    target_amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    deadline: Optional[date] = None


class GoalProgressUpdate(BaseModel):
    """Request body for PATCH /v1/goals/{goal_id}: set or add to the saved amount"""

    current_amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    contribution: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2)


class GoalResponse(BaseModel):
    id: str
    title: str
    target_amount: Decimal
    current_amount: Decimal
    deadline: Optional[date] = None
    percentage: float
    remaining: Decimal
    completed: bool
    tier: Literal["complete", "almost", "halfway", "started"]
