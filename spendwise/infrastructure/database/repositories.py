"""Data access layer for spending entities"""

import uuid
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional, Set
from sqlalchemy.orm import Session

from spendwise.infrastructure.database.models import (
    BadgeRecord,
    ExpenseRecord,
    GoalRecord,
    NudgeRecord,
    Profile,
    SpendingComparisonRecord,
)
from spendwise.domain.models import BadgeAward, Category, Expense, ExpenseType, Goal, PeriodComparison, PeriodRange
from spendwise.domain.exceptions import ExpenseNotFoundError, GoalNotFoundError, ProfileNotFoundError


def to_expense(record: ExpenseRecord) -> Expense:
    """Immutable domain snapshot of a stored expense"""
    return Expense(
        id=str(record.id),
        user_id=record.user_id,
        item_name=record.item_name,
        amount=Decimal(record.amount),
        category=Category(record.category),
        expense_type=ExpenseType(record.expense_type),
        date=record.date,
        created_at=record.created_at,
    )


def to_goal(record: GoalRecord) -> Goal:
    return Goal(
        id=str(record.id),
        title=record.title,
        target_amount=Decimal(record.target_amount),
        current_amount=Decimal(record.current_amount),
        deadline=record.deadline,
    )


class ProfileRepository:
    """Repository for user profiles"""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> Optional[Profile]:
        return self.db.get(Profile, user_id)

    def require(self, user_id: str) -> Profile:
        profile = self.get(user_id)
        if profile is None:
            raise ProfileNotFoundError(f"No profile for user {user_id}")
        return profile

    def monthly_budget(self, user_id: str) -> Decimal:
        """Budget for the user, 0 when no profile has been saved yet"""
        profile = self.get(user_id)
        return Decimal(profile.monthly_budget) if profile else Decimal("0")

    def upsert(self, user_id: str, name: Optional[str] = None, monthly_budget: Optional[Decimal] = None) -> Profile:
        """Create the profile on first write, otherwise update the given fields"""
        profile = self.get(user_id)
        if profile is None:
            profile = Profile(id=user_id, name=name or "", monthly_budget=monthly_budget or Decimal("0"))
            self.db.add(profile)
        else:
            if name is not None:
                profile.name = name
            if monthly_budget is not None:
                profile.monthly_budget = monthly_budget
        self.db.flush()
        return profile


class ExpenseRepository:
    """Repository for logged expenses"""

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        user_id: str,
        item_name: str,
        amount: Decimal,
        category: Category,
        expense_type: ExpenseType,
        spent_on: date,
    ) -> ExpenseRecord:
        """Persist an expense"""
        record = ExpenseRecord(
            user_id=user_id,
            item_name=item_name,
            amount=amount,
            category=category,
            expense_type=expense_type,
            date=spent_on,
        )
        self.db.add(record)
        self.db.flush()  # Get ID without committing
        return record

    def list_between(self, user_id: str, start: date, end: date) -> List[ExpenseRecord]:
        """Expenses dated within [start, end], newest first"""
        return (
            self.db.query(ExpenseRecord)
            .filter(ExpenseRecord.user_id == user_id)
            .filter(ExpenseRecord.date >= start, ExpenseRecord.date <= end)
            .order_by(ExpenseRecord.date.desc(), ExpenseRecord.created_at.desc())
            .all()
        )

    def snapshot(self, user_id: str, period: PeriodRange) -> List[Expense]:
        """Domain snapshots for a week or month"""
        return [to_expense(r) for r in self.list_between(user_id, period.start_date, period.end_date)]

    def search(
        self,
        user_id: str,
        search: Optional[str] = None,
        category: Optional[Category] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        sort_by: str = "date",
        descending: bool = True,
        limit: int = 200,
    ) -> List[ExpenseRecord]:
        """Expense history with optional text search, category filter and sorting"""
        query = self.db.query(ExpenseRecord).filter(ExpenseRecord.user_id == user_id)

        if search:
            query = query.filter(ExpenseRecord.item_name.ilike(f"%{search}%"))
        if category is not None:
            query = query.filter(ExpenseRecord.category == category)
        if start is not None:
            query = query.filter(ExpenseRecord.date >= start)
        if end is not None:
            query = query.filter(ExpenseRecord.date <= end)

        column = ExpenseRecord.amount if sort_by == "amount" else ExpenseRecord.date
        ordering = column.desc() if descending else column.asc()

        return query.order_by(ordering, ExpenseRecord.created_at.desc()).limit(limit).all()

    def recent(self, user_id: str, limit: int = 5) -> List[ExpenseRecord]:
        """Latest expenses by date, then by logging time"""
        return (
            self.db.query(ExpenseRecord)
            .filter(ExpenseRecord.user_id == user_id)
            .order_by(ExpenseRecord.date.desc(), ExpenseRecord.created_at.desc())
            .limit(limit)
            .all()
        )

    def delete(self, user_id: str, expense_id: uuid.UUID) -> None:
        record = (
            self.db.query(ExpenseRecord)
            .filter(ExpenseRecord.id == expense_id, ExpenseRecord.user_id == user_id)
            .first()
        )
        if record is None:
            raise ExpenseNotFoundError(f"Expense {expense_id} not found")
        self.db.delete(record)
        self.db.flush()


class GoalRepository:
    """Repository for savings goals"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: str, title: str, target_amount: Decimal, deadline: Optional[date]) -> GoalRecord:
        record = GoalRecord(
            user_id=user_id,
            title=title,
            target_amount=target_amount,
            current_amount=Decimal("0"),
            deadline=deadline,
        )
        self.db.add(record)
        self.db.flush()
        return record

    def list_for_user(self, user_id: str) -> List[GoalRecord]:
        return (
            self.db.query(GoalRecord)
            .filter(GoalRecord.user_id == user_id)
            .order_by(GoalRecord.created_at.desc())
            .all()
        )

    def get(self, user_id: str, goal_id: uuid.UUID) -> GoalRecord:
        record = (
            self.db.query(GoalRecord)
            .filter(GoalRecord.id == goal_id, GoalRecord.user_id == user_id)
            .first()
        )
        if record is None:
            raise GoalNotFoundError(f"Goal {goal_id} not found")
        return record

    def set_current_amount(self, user_id: str, goal_id: uuid.UUID, amount: Decimal) -> GoalRecord:
        record = self.get(user_id, goal_id)
        record.current_amount = amount
        self.db.flush()
        return record

    def delete(self, user_id: str, goal_id: uuid.UUID) -> None:
        self.db.delete(self.get(user_id, goal_id))
        self.db.flush()


class NudgeRepository:
    """Repository for stored nudges"""

    def __init__(self, db: Session):
        self.db = db

    def recent(self, user_id: str, limit: int = 5) -> List[NudgeRecord]:
        return (
            self.db.query(NudgeRecord)
            .filter(NudgeRecord.user_id == user_id)
            .order_by(NudgeRecord.created_at.desc())
            .limit(limit)
            .all()
        )

    def add_new(self, user_id: str, messages: Iterable[str], window: int = 5) -> List[NudgeRecord]:
        """Store messages that are not among the user's `window` most recent nudges"""
        existing = {record.message for record in self.recent(user_id, limit=window)}

        created = []
        for message in messages:
            if message in existing:
                continue
            record = NudgeRecord(user_id=user_id, message=message)
            self.db.add(record)
            existing.add(message)
            created.append(record)

        self.db.flush()
        return created

    def mark_read(self, user_id: str, nudge_id: uuid.UUID) -> Optional[NudgeRecord]:
        record = (
            self.db.query(NudgeRecord)
            .filter(NudgeRecord.id == nudge_id, NudgeRecord.user_id == user_id)
            .first()
        )
        if record is not None:
            record.is_read = True
            self.db.flush()
        return record


class BadgeRepository:
    """Repository for earned badges"""

    def __init__(self, db: Session):
        self.db = db

    def list_for_user(self, user_id: str) -> List[BadgeRecord]:
        return (
            self.db.query(BadgeRecord)
            .filter(BadgeRecord.user_id == user_id)
            .order_by(BadgeRecord.earned_at.desc())
            .all()
        )

    def earned_types(self, user_id: str) -> Set[str]:
        return {
            badge_type
            for (badge_type,) in self.db.query(BadgeRecord.badge_type).filter(BadgeRecord.user_id == user_id)
        }

    def add(self, user_id: str, awards: Iterable[BadgeAward]) -> List[BadgeRecord]:
        """Persist newly earned badges (the unique constraint rejects duplicates)"""
        records = [
            BadgeRecord(
                user_id=user_id,
                badge_name=award.name,
                badge_type=award.type,
                description=award.description,
            )
            for award in awards
        ]
        self.db.add_all(records)
        self.db.flush()
        return records


class ComparisonRepository:
    """Repository for period spending snapshots"""

    def __init__(self, db: Session):
        self.db = db

    def upsert(self, user_id: str, comparison: PeriodComparison) -> SpendingComparisonRecord:
        """Insert or refresh the snapshot for the comparison's current period"""
        current = comparison.current_period
        breakdown = {category.value: str(amount) for category, amount in current.category_breakdown.items()}

        record = (
            self.db.query(SpendingComparisonRecord)
            .filter(
                SpendingComparisonRecord.user_id == user_id,
                SpendingComparisonRecord.period_type == comparison.kind,
                SpendingComparisonRecord.period_start == current.start,
            )
            .first()
        )
        if record is None:
            record = SpendingComparisonRecord(
                user_id=user_id,
                period_type=comparison.kind,
                period_start=current.start,
            )
            self.db.add(record)

        record.period_end = current.end
        record.total_spent = current.total
        record.category_breakdown = breakdown
        self.db.flush()
        return record
