"""GET/PUT /v1/profile - Name and monthly budget"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from spendwise.api.v1.schemas import ProfileResponse, ProfileUpdate
from spendwise.api.dependencies import get_current_user_id
from spendwise.infrastructure.database.session import get_db
from spendwise.infrastructure.database.repositories import ProfileRepository
from spendwise.domain.exceptions import ProfileNotFoundError

router = APIRouter()


@router.get("/profile", response_model=ProfileResponse)
def get_profile(user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """Retrieve the caller's profile"""
    try:
        profile = ProfileRepository(db).require(user_id)
    except ProfileNotFoundError:
        raise HTTPException(status_code=404, detail="Profile not found")

    return ProfileResponse.model_validate(profile)


@router.put("/profile", response_model=ProfileResponse)
def update_profile(
    request_body: ProfileUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Create or update the caller's profile (name and monthly budget)"""
    profile = ProfileRepository(db).upsert(
        user_id,
        name=request_body.name,
        monthly_budget=request_body.monthly_budget,
    )
    db.commit()

    return ProfileResponse.model_validate(profile)
