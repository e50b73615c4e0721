from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.database import get_db
from app.schemas.token import TokenResponse
from app.schemas.user import UserCreate
from app.services.auth_service import AuthService

router = APIRouter()


@router.post("", response_model=TokenResponse)
async def register(
    user_in: UserCreate,
    db: Session = Depends(get_db)
) -> Any:
    """Register a new user and return an access token."""
    token = await AuthService.register(db, user_in.name, user_in.email, user_in.password)
    return TokenResponse(token=token)
