from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.fields import optional_text, require_text
from app.schemas.user import UserSummary

PROFILE_FIELDS = ("company", "website", "location", "bio", "status", "githubusername")
SOCIAL_FIELDS = ("youtube", "twitter", "facebook", "instagram", "linkedin")


def parse_skills(skills: str) -> List[str]:
    """Split a comma-separated skills string into trimmed, non-empty items."""
    return [skill.strip() for skill in skills.split(",") if skill.strip()]


# Request schemas
class ProfileUpsert(BaseModel):
    """Partial profile update: only non-empty fields are applied."""

    model_config = ConfigDict(validate_default=True)

    status: Optional[str] = None
    skills: Optional[str] = None
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None

    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def status_required(cls, v):
        return require_text(v, "Status is required")

    @field_validator("skills", mode="before")
    @classmethod
    def skills_required(cls, v):
        if isinstance(v, list):
            v = ",".join(str(item) for item in v)
        v = require_text(v, "Skills are required")
        if not parse_skills(v):
            raise ValueError("Skills are required")
        return v

    @field_validator(
        "company", "website", "location", "bio", "githubusername", *SOCIAL_FIELDS,
        mode="before",
    )
    @classmethod
    def blank_is_absent(cls, v):
        return optional_text(v)

    def to_patch(self) -> Dict[str, Any]:
        """Fields to write, keyed by profile attribute."""
        patch: Dict[str, Any] = {
            field: getattr(self, field)
            for field in PROFILE_FIELDS
            if getattr(self, field)
        }
        if self.skills:
            patch["skills"] = parse_skills(self.skills)

        social = {field: getattr(self, field) for field in SOCIAL_FIELDS if getattr(self, field)}
        if social:
            patch["social"] = social
        return patch


class ExperienceCreate(BaseModel):
    model_config = ConfigDict(validate_default=True, populate_by_name=True)

    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    from_: Optional[date] = Field(default=None, alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def title_required(cls, v):
        return require_text(v, "Title is required")

    @field_validator("company", mode="before")
    @classmethod
    def company_required(cls, v):
        return require_text(v, "Company is required")

    @field_validator("from_", mode="before")
    @classmethod
    def from_required(cls, v):
        if isinstance(v, date):
            return v
        return require_text(v, "Start date is required")

    @field_validator("location", "to", "description", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        return optional_text(v)

    @field_validator("current", mode="before")
    @classmethod
    def null_is_false(cls, v):
        return False if v is None else v


class EducationCreate(BaseModel):
    model_config = ConfigDict(validate_default=True, populate_by_name=True)

    school: Optional[str] = None
    degree: Optional[str] = None
    fieldofstudy: Optional[str] = None
    from_: Optional[date] = Field(default=None, alias="from")
    to: Optional[date] = None
    description: Optional[str] = None

    @field_validator("school", mode="before")
    @classmethod
    def school_required(cls, v):
        return require_text(v, "School is required")

    @field_validator("degree", mode="before")
    @classmethod
    def degree_required(cls, v):
        return require_text(v, "Degree is required")

    @field_validator("fieldofstudy", mode="before")
    @classmethod
    def fieldofstudy_required(cls, v):
        return require_text(v, "Field of study is required")

    @field_validator("from_", mode="before")
    @classmethod
    def from_required(cls, v):
        if isinstance(v, date):
            return v
        return require_text(v, "Start date is required")

    @field_validator("to", "description", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        return optional_text(v)


# Response schemas
class SocialLinks(BaseModel):
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None


class ExperienceEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    company: str
    location: Optional[str] = None
    from_: date = Field(alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


class EducationEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_: date = Field(alias="from")
    to: Optional[date] = None
    description: Optional[str] = None


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user: UserSummary
    status: str
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    skills: List[str] = []
    social: SocialLinks = SocialLinks()
    experience: List[ExperienceEntry] = []
    education: List[EducationEntry] = []
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    msg: str
