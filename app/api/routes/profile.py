from typing import Any, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.db.database import get_db
from app.models.user import User
from app.schemas.profile import (
    EducationCreate,
    ExperienceCreate,
    MessageResponse,
    ProfileResponse,
    ProfileUpsert,
)
from app.services.profile_service import ProfileService

router = APIRouter()


@router.get("/me", response_model=ProfileResponse)
async def read_own_profile(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    """Get current user's profile."""
    return await ProfileService.get_own_profile(db, user.id)


@router.post("", response_model=ProfileResponse)
async def upsert_profile(
    profile_in: ProfileUpsert,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    """Create or update the current user's profile."""
    return await ProfileService.upsert_profile(db, user.id, profile_in)


@router.get("", response_model=List[ProfileResponse])
async def read_profiles(db: Session = Depends(get_db)) -> Any:
    """Get all profiles."""
    return await ProfileService.list_profiles(db)


@router.get("/user/{user_id}", response_model=ProfileResponse)
async def read_profile_by_user(user_id: str, db: Session = Depends(get_db)) -> Any:
    return await ProfileService.get_profile_by_user_id(db, user_id)


@router.delete("", response_model=MessageResponse)
async def delete_profile(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    """Delete profile and user."""
    await ProfileService.delete_profile_and_user(db, user.id)
    return MessageResponse(msg="User removed")


@router.put("/experience", response_model=ProfileResponse)
async def add_experience(
    experience_in: ExperienceCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    return await ProfileService.add_experience(db, user.id, experience_in)


@router.delete("/experience/{exp_id}", response_model=ProfileResponse)
async def remove_experience(
    exp_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    return await ProfileService.remove_experience(db, user.id, exp_id)


@router.put("/education", response_model=ProfileResponse)
async def add_education(
    education_in: EducationCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    return await ProfileService.add_education(db, user.id, education_in)


@router.delete("/education/{edu_id}", response_model=ProfileResponse)
async def remove_education(
    edu_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Any:
    return await ProfileService.remove_education(db, user.id, edu_id)
