from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from app.schemas.fields import require_text, valid_email


class UserCreate(BaseModel):
    model_config = ConfigDict(validate_default=True)

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, v):
        return require_text(v, "Name is required")

    @field_validator("email", mode="before")
    @classmethod
    def email_valid(cls, v):
        return valid_email(v)

    @field_validator("password", mode="before")
    @classmethod
    def password_length(cls, v):
        if not isinstance(v, str) or len(v) < 6:
            raise ValueError("Please enter a password with 6 or more characters")
        return v


class UserLogin(BaseModel):
    model_config = ConfigDict(validate_default=True)

    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def email_valid(cls, v):
        return valid_email(v)

    @field_validator("password", mode="before")
    @classmethod
    def password_required(cls, v):
        if not isinstance(v, str):
            raise ValueError("Password is required")
        return v


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    avatar: Optional[str] = None
    created_at: datetime


class UserSummary(BaseModel):
    """Owner fields embedded in a serialized profile."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    avatar: Optional[str] = None
