from pydantic import BaseModel, EmailStr, ValidationError

from app.core.security import normalize_email


def require_text(value, message: str) -> str:
    """Reject missing or blank strings with a client-facing message."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(message)
    return value.strip()


def optional_text(value):
    """Blank strings count as absent."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class _EmailCheck(BaseModel):
    email: EmailStr


def valid_email(value) -> str:
    if isinstance(value, str):
        value = value.strip()
    try:
        _EmailCheck(email=value)
    except ValidationError:
        raise ValueError("Please provide a valid email")
    return normalize_email(value)
