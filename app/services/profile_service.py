import uuid
from typing import List

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFound, StoreError
from app.models.profile import Profile
from app.schemas.profile import EducationCreate, ExperienceCreate, ProfileUpsert
from app.services.user_service import UserService

NO_PROFILE = "There is no profile for this user"
PROFILE_NOT_FOUND = "Profile not found"


def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error {action}: {str(e)}")
        raise StoreError() from e


def _new_entry(entry) -> dict:
    data = entry.model_dump(mode="json", by_alias=True)
    data["id"] = str(uuid.uuid4())
    return data


class ProfileService:
    @staticmethod
    async def upsert_profile(db: Session, user_id: str, fields: ProfileUpsert) -> Profile:
        """Create the user's profile, or apply the non-empty fields to it."""
        patch = fields.to_patch()
        social = patch.pop("social", {})

        profile = db.query(Profile).filter(Profile.user_id == user_id).first()
        if profile is None:
            profile = Profile(user_id=user_id, skills=[], social={}, experience=[], education=[])
            db.add(profile)
            action = "creating profile"
        else:
            action = "updating profile"

        for field, value in patch.items():
            setattr(profile, field, value)
        if social:
            # Reassign so the JSON column is flagged dirty
            profile.social = {**(profile.social or {}), **social}

        _commit(db, action)
        db.refresh(profile)
        logger.info(f"Saved profile for user {user_id}")
        return profile

    @staticmethod
    async def get_own_profile(db: Session, user_id: str) -> Profile:
        profile = db.query(Profile).filter(Profile.user_id == user_id).first()
        if not profile:
            raise NotFound(NO_PROFILE)
        return profile

    @staticmethod
    async def list_profiles(db: Session) -> List[Profile]:
        return db.query(Profile).order_by(Profile.created_at).all()

    @staticmethod
    async def get_profile_by_user_id(db: Session, user_id: str) -> Profile:
        """Public lookup; malformed ids are reported as not found."""
        try:
            user_id = str(uuid.UUID(user_id))
        except (TypeError, ValueError):
            raise NotFound(PROFILE_NOT_FOUND)

        profile = db.query(Profile).filter(Profile.user_id == user_id).first()
        if not profile:
            raise NotFound(PROFILE_NOT_FOUND)
        return profile

    @staticmethod
    async def delete_profile_and_user(db: Session, user_id: str) -> None:
        """Remove the profile (if any) and the user record."""
        # TODO: remove the user's posts once posts are stored by this service
        profile = db.query(Profile).filter(Profile.user_id == user_id).first()
        if profile:
            db.delete(profile)
        await UserService.delete_user(db, user_id)
        _commit(db, "deleting user")
        logger.info(f"Deleted user {user_id} and profile")

    @staticmethod
    async def add_experience(db: Session, user_id: str, entry: ExperienceCreate) -> Profile:
        profile = await ProfileService.get_own_profile(db, user_id)
        profile.experience = [_new_entry(entry)] + list(profile.experience or [])
        _commit(db, "adding experience")
        db.refresh(profile)
        return profile

    @staticmethod
    async def remove_experience(db: Session, user_id: str, exp_id: str) -> Profile:
        """Drop the entry with exp_id; unknown ids leave the list as is."""
        profile = await ProfileService.get_own_profile(db, user_id)
        profile.experience = [e for e in (profile.experience or []) if e.get("id") != exp_id]
        _commit(db, "removing experience")
        db.refresh(profile)
        return profile

    @staticmethod
    async def add_education(db: Session, user_id: str, entry: EducationCreate) -> Profile:
        profile = await ProfileService.get_own_profile(db, user_id)
        profile.education = [_new_entry(entry)] + list(profile.education or [])
        _commit(db, "adding education")
        db.refresh(profile)
        return profile

    @staticmethod
    async def remove_education(db: Session, user_id: str, edu_id: str) -> Profile:
        """Drop the entry with edu_id; unknown ids leave the list as is."""
        profile = await ProfileService.get_own_profile(db, user_id)
        profile.education = [e for e in (profile.education or []) if e.get("id") != edu_id]
        _commit(db, "removing education")
        db.refresh(profile)
        return profile
