"""GET /v1/rewards - Badges, activity awards and points"""

import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from spendwise.api.v1.schemas import BadgeAwardSchema, RewardsResponse
from spendwise.api.v1.dashboard import badge_schema
from spendwise.api.dependencies import get_current_user_id, get_request_id
from spendwise.infrastructure.database.session import get_db
from spendwise.infrastructure.database.repositories import BadgeRepository, ExpenseRepository, ProfileRepository
from spendwise.infrastructure.database.models import BadgeRecord
from spendwise.infrastructure.observability.metrics import record_badges
from spendwise.infrastructure.observability.logging import log_badges_awarded
from spendwise.domain.badges import activity_badges, evaluate_badges, reward_summary
from spendwise.domain.periods import month_range

router = APIRouter()


@router.get("/rewards", response_model=RewardsResponse)
def get_rewards(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Award activity badges for the current month and report points.

    Newly awarded badges are appended to the already-loaded list instead of
    re-reading the badge table.
    """
    request_id = get_request_id(request)

    try:
        expenses = ExpenseRepository(db).snapshot(user_id, month_range(0, date.today()))
        monthly_budget = ProfileRepository(db).monthly_budget(user_id)

        badge_repo = BadgeRepository(db)
        badges = badge_repo.list_for_user(user_id)
        earned = {b.badge_type for b in badges}

        evaluation = evaluate_badges(activity_badges(expenses, monthly_budget, earned), earned)
        created = badge_repo.add(user_id, evaluation.new_badges)
        db.commit()

    except IntegrityError as e:
        db.rollback()
        logging.warning(f"Concurrent rewards refresh: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail="Rewards are being refreshed, retry")

    except Exception as e:
        db.rollback()
        logging.error(f"Rewards failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    new_types = [b.type for b in evaluation.new_badges]
    record_badges(new_types)
    log_badges_awarded(request_id, user_id, new_types, source="activity")

    all_badges: list[BadgeRecord] = created + badges
    summary = reward_summary(len(evaluation.earned_types), len(expenses))

    return RewardsResponse(
        points=summary.points,
        level=summary.level,
        points_to_next_level=summary.points_to_next_level,
        level_progress_percent=summary.level_progress_percent,
        badges=[badge_schema(b) for b in all_badges],
        new_badges=[
            BadgeAwardSchema(type=b.type, name=b.name, description=b.description)
            for b in evaluation.new_badges
        ],
    )
