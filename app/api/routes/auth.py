from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.db.database import get_db
from app.models.user import User
from app.schemas.token import TokenResponse
from app.schemas.user import UserLogin, UserResponse
from app.services.auth_service import AuthService

router = APIRouter()


@router.get("", response_model=UserResponse)
async def read_current_user(
    current_user: User = Depends(get_current_user)
) -> Any:
    """Get the authenticated user, without the password."""
    return current_user


@router.post("", response_model=TokenResponse)
async def login(
    credentials: UserLogin,
    db: Session = Depends(get_db)
) -> Any:
    """Authenticate user and get token."""
    token = await AuthService.authenticate(db, credentials.email, credentials.password)
    return TokenResponse(token=token)
