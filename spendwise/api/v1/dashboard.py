"""GET /v1/dashboard - Current month overview with score, nudges and badges"""

import uuid
import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from spendwise.api.v1.schemas import BadgeSchema, CategoryStatsSchema, DashboardResponse, NudgeSchema
from spendwise.api.dependencies import get_current_user_id, get_request_id
from spendwise.config import settings
from spendwise.infrastructure.database.session import get_db
from spendwise.infrastructure.database.repositories import (
    BadgeRepository,
    ExpenseRepository,
    NudgeRepository,
    ProfileRepository,
)
from spendwise.infrastructure.database.models import BadgeRecord, NudgeRecord
from spendwise.infrastructure.observability.metrics import nudges_generated_counter, record_score
from spendwise.infrastructure.observability.logging import log_score
from spendwise.domain.aggregation import category_stats, total_spent
from spendwise.domain.catalog import badge_color, category_color
from spendwise.domain.nudges import generate_nudges
from spendwise.domain.periods import month_range
from spendwise.domain.scoring import score_band, smart_spend_score

router = APIRouter()


def nudge_schema(record: NudgeRecord) -> NudgeSchema:
    return NudgeSchema(
        id=str(record.id),
        message=record.message,
        is_read=record.is_read,
        created_at=record.created_at,
    )


def badge_schema(record: BadgeRecord) -> BadgeSchema:
    return BadgeSchema(
        type=record.badge_type,
        name=record.badge_name,
        description=record.description,
        color=badge_color(record.badge_type),
        earned_at=record.earned_at,
    )


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Summarise the current month.

    Flow:
    1. Load this month's and last month's expenses
    2. Compute category stats and the Smart Spend Score
    3. Generate nudges and store the ones the user has not seen
    4. Return totals, score, stats, nudges and earned badges
    """
    request_id = get_request_id(request)
    today = date.today()
    current_month = month_range(0, today)
    previous_month = month_range(1, today)

    try:
        expense_repo = ExpenseRepository(db)
        expenses = expense_repo.snapshot(user_id, current_month)
        previous_expenses = expense_repo.snapshot(user_id, previous_month)
        monthly_budget = ProfileRepository(db).monthly_budget(user_id)

        stats = category_stats(expenses)
        score = smart_spend_score(expenses, monthly_budget, previous_expenses)
        band = score_band(score)
        messages = generate_nudges(expenses, monthly_budget, stats)

        nudge_repo = NudgeRepository(db)
        created = nudge_repo.add_new(user_id, messages, window=settings.recent_nudge_limit)
        db.commit()

        recent_nudges = nudge_repo.recent(user_id, limit=settings.recent_nudge_limit)
        badges = BadgeRepository(db).list_for_user(user_id)

    except Exception as e:
        db.rollback()
        logging.error(f"Dashboard failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    nudges_generated_counter.inc(len(created))
    record_score(score, band)
    log_score(request_id, user_id, score, band, len(expenses))

    total = total_spent(expenses)

    return DashboardResponse(
        period_start=current_month.start_date,
        period_end=current_month.end_date,
        total_spent=total,
        monthly_budget=monthly_budget,
        remaining_budget=monthly_budget - total,
        smart_spend_score=score,
        score_band=band,
        category_stats=[
            CategoryStatsSchema(
                category=s.category,
                total=s.total,
                percentage=s.percentage,
                count=s.count,
                needs_total=s.needs_total,
                wants_total=s.wants_total,
                color=category_color(s.category),
            )
            for s in stats
        ],
        generated_nudges=messages,
        recent_nudges=[nudge_schema(n) for n in recent_nudges],
        badges=[badge_schema(b) for b in badges],
    )


@router.post("/nudges/{nudge_id}/read", response_model=NudgeSchema)
def mark_nudge_read(
    nudge_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Mark a stored nudge as read"""
    try:
        nudge_uuid = uuid.UUID(nudge_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid nudge ID format")

    record = NudgeRepository(db).mark_read(user_id, nudge_uuid)
    if record is None:
        raise HTTPException(status_code=404, detail="Nudge not found")

    db.commit()
    return nudge_schema(record)
