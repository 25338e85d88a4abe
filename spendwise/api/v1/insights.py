"""GET /v1/insights - Week-over-week and month-over-month comparisons"""

import logging
from datetime import date
from typing import Dict
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from spendwise.api.v1.schemas import (
    BadgeAwardSchema,
    CategoryChangeSchema,
    ChangesSchema,
    ComparisonSchema,
    InsightsResponse,
    PeriodSummarySchema,
)
from spendwise.api.dependencies import get_current_user_id, get_request_id
from spendwise.infrastructure.database.session import get_db
from spendwise.infrastructure.database.repositories import BadgeRepository, ComparisonRepository, ExpenseRepository
from spendwise.infrastructure.observability.metrics import record_badges
from spendwise.infrastructure.observability.logging import log_badges_awarded
from spendwise.domain.badges import comparison_badges, evaluate_badges
from spendwise.domain.comparison import compare_monthly, compare_weekly
from spendwise.domain.models import PeriodComparison, PeriodSummary
from spendwise.domain.periods import month_range, week_range

router = APIRouter()


def _breakdown(summary: PeriodSummary) -> Dict[str, object]:
    return {category.value: amount for category, amount in summary.category_breakdown.items()}


def comparison_schema(comparison: PeriodComparison) -> ComparisonSchema:
    current = comparison.current_period
    previous = comparison.previous_period
    return ComparisonSchema(
        kind=comparison.kind,
        current_period=PeriodSummarySchema(
            start=current.start,
            end=current.end,
            total=current.total,
            category_breakdown=_breakdown(current),
        ),
        previous_period=PeriodSummarySchema(
            start=previous.start,
            end=previous.end,
            total=previous.total,
            category_breakdown=_breakdown(previous),
        ),
        changes=ChangesSchema(
            total_change=comparison.changes.total_change,
            total_change_percent=comparison.changes.total_change_percent,
            category_changes={
                category.value: CategoryChangeSchema(amount=change.amount, percent=change.percent)
                for category, change in comparison.changes.category_changes.items()
            },
        ),
        improvement=comparison.improvement,
    )


@router.get("/insights", response_model=InsightsResponse)
def get_insights(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Compare this week and month against the previous ones.

    Flow:
    1. Load expenses for the current and previous week and month
    2. Compute both comparisons
    3. Store the current period snapshots
    4. Award comparison badges the user does not hold yet
    """
    request_id = get_request_id(request)
    today = date.today()

    try:
        expense_repo = ExpenseRepository(db)
        weekly = compare_weekly(
            expense_repo.snapshot(user_id, week_range(0, today)),
            expense_repo.snapshot(user_id, week_range(1, today)),
            today,
        )
        monthly = compare_monthly(
            expense_repo.snapshot(user_id, month_range(0, today)),
            expense_repo.snapshot(user_id, month_range(1, today)),
            today,
        )

        comparison_repo = ComparisonRepository(db)
        comparison_repo.upsert(user_id, weekly)
        comparison_repo.upsert(user_id, monthly)

        badge_repo = BadgeRepository(db)
        earned = badge_repo.earned_types(user_id)
        evaluation = evaluate_badges(comparison_badges(weekly, monthly, earned), earned)
        badge_repo.add(user_id, evaluation.new_badges)

        db.commit()

    except IntegrityError as e:
        db.rollback()
        logging.warning(f"Concurrent insights refresh: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail="Insights are being refreshed, retry")

    except Exception as e:
        db.rollback()
        logging.error(f"Insights failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    new_types = [b.type for b in evaluation.new_badges]
    record_badges(new_types)
    log_badges_awarded(request_id, user_id, new_types, source="comparison")

    return InsightsResponse(
        weekly=comparison_schema(weekly),
        monthly=comparison_schema(monthly),
        new_badges=[
            BadgeAwardSchema(type=b.type, name=b.name, description=b.description)
            for b in evaluation.new_badges
        ],
    )
