"""/v1/goals - Savings goals and their progress"""

import uuid
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from spendwise.api.v1.schemas import GoalCreate, GoalProgressUpdate, GoalResponse
from spendwise.api.dependencies import get_current_user_id
from spendwise.infrastructure.database.session import get_db
from spendwise.infrastructure.database.repositories import GoalRepository, to_goal
from spendwise.infrastructure.database.models import GoalRecord
from spendwise.domain.exceptions import GoalNotFoundError
from spendwise.domain.goals import add_contribution, goal_progress

router = APIRouter()


def _goal_response(record: GoalRecord) -> GoalResponse:
    goal = to_goal(record)
    progress = goal_progress(goal)
    return GoalResponse(
        id=goal.id,
        title=goal.title,
        target_amount=goal.target_amount,
        current_amount=goal.current_amount,
        deadline=goal.deadline,
        percentage=progress.percentage,
        remaining=progress.remaining,
        completed=progress.completed,
        tier=progress.tier,
    )


def _parse_goal_id(goal_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(goal_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid goal ID format")


@router.get("/goals", response_model=List[GoalResponse])
def list_goals(user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """Retrieve the caller's goals, newest first"""
    return [_goal_response(g) for g in GoalRepository(db).list_for_user(user_id)]


@router.post("/goals", response_model=GoalResponse, status_code=201)
def create_goal(
    request_body: GoalCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Create a savings goal"""
    record = GoalRepository(db).create(
        user_id=user_id,
        title=request_body.title,
        target_amount=request_body.target_amount,
        deadline=request_body.deadline,
    )
    db.commit()
    return _goal_response(record)


@router.patch("/goals/{goal_id}", response_model=GoalResponse)
def update_goal_progress(
    goal_id: str,
    request_body: GoalProgressUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Set the saved amount directly, or add a contribution to it"""
    goal_uuid = _parse_goal_id(goal_id)
    if request_body.current_amount is None and request_body.contribution is None:
        raise HTTPException(status_code=422, detail="Provide current_amount or contribution")

    repo = GoalRepository(db)
    try:
        if request_body.current_amount is not None:
            amount = request_body.current_amount
        else:
            amount = add_contribution(to_goal(repo.get(user_id, goal_uuid)), request_body.contribution)
        record = repo.set_current_amount(user_id, goal_uuid, amount)
    except GoalNotFoundError:
        raise HTTPException(status_code=404, detail="Goal not found")

    db.commit()
    return _goal_response(record)


@router.delete("/goals/{goal_id}", status_code=204)
def delete_goal(
    goal_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Delete one of the caller's goals"""
    goal_uuid = _parse_goal_id(goal_id)
    try:
        GoalRepository(db).delete(user_id, goal_uuid)
    except GoalNotFoundError:
        raise HTTPException(status_code=404, detail="Goal not found")

    db.commit()
    return Response(status_code=204)
