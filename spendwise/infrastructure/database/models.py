"""SQLAlchemy ORM models for profiles, expenses, goals, nudges, badges and comparisons"""

import uuid
from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Enum,
    Numeric,
    Text,
    UniqueConstraint,
    JSON,
    Uuid,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

from spendwise.domain.models import Category, ExpenseType, PeriodKind

Base = declarative_base()

# Money columns: two decimal places, returned as Decimal
Money = Numeric(12, 2, asdecimal=True)


def _values(enum_cls):
    return [member.value for member in enum_cls]


class Profile(Base):
    """User profile; id is the identity provider's user id"""

    __tablename__ = "profile"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False, default="")
    monthly_budget = Column(Money, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class ExpenseRecord(Base):
    """Logged expense"""

    __tablename__ = "expense"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    item_name = Column(Text, nullable=False)
    amount = Column(Money, nullable=False)
    category = Column(Enum(Category, values_callable=_values, native_enum=False), nullable=False)
    expense_type = Column(Enum(ExpenseType, values_callable=_values, native_enum=False), nullable=False)
    date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class GoalRecord(Base):
    """Savings goal"""

    __tablename__ = "goal"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    title = Column(Text, nullable=False)
    target_amount = Column(Money, nullable=False)
    current_amount = Column(Money, nullable=False, default=0)
    deadline = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())


class NudgeRecord(Base):
    """Advisory message shown to a user"""

    __tablename__ = "nudge"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class BadgeRecord(Base):
    """Earned badge; a type is awarded at most once per user"""

    __tablename__ = "badge"
    __table_args__ = (UniqueConstraint("user_id", "badge_type", name="uq_badge_user_type"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    badge_name = Column(Text, nullable=False)
    badge_type = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    earned_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class SpendingComparisonRecord(Base):
    """Snapshot of a period's spending, one row per user/period"""

    __tablename__ = "spending_comparison"
    __table_args__ = (
        UniqueConstraint("user_id", "period_type", "period_start", name="uq_comparison_user_period"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    period_type = Column(Enum(PeriodKind, values_callable=_values, native_enum=False), nullable=False)
    period_start = Column(Date, nullable=False)
    period_end = Column(Date, nullable=False)
    total_spent = Column(Money, nullable=False)
    category_breakdown = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
