from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.core.exceptions import MissingToken
from app.db.database import get_db
from app.models.user import User
from app.services.auth_service import AuthService


def get_token(
    authorization: Optional[str] = Header(default=None),
    x_auth_token: Optional[str] = Header(default=None),
) -> str:
    """Read the token from `Authorization: Bearer` or the legacy x-auth-token header."""
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()
    if x_auth_token:
        return x_auth_token.strip()
    raise MissingToken()


def get_current_user_id(token: str = Depends(get_token)) -> str:
    """Resolve the acting user id from the request token."""
    return AuthService.resolve_token(token)


async def get_current_user(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    return await AuthService.get_current_user(db, user_id)
