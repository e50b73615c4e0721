from loguru import logger
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateEmail, InvalidCredentials, NotFound
from app.core.security import (
    create_access_token,
    get_password_hash,
    gravatar_url,
    normalize_email,
    verify_password,
    verify_token,
)
from app.models.user import User
from app.services.user_service import UserService


class AuthService:
    @staticmethod
    async def authenticate(db: Session, email: str, password: str) -> str:
        """Check credentials and issue an access token."""
        user = await UserService.get_user_by_email(db, normalize_email(email))
        if not user or not verify_password(password, user.password):
            logger.info("Rejected login attempt")
            raise InvalidCredentials()
        return create_access_token(user.id)

    @staticmethod
    async def register(db: Session, name: str, email: str, password: str) -> str:
        """Create a user and issue an access token."""
        email = normalize_email(email)
        if await UserService.get_user_by_email(db, email):
            raise DuplicateEmail()

        user = await UserService.create_user(
            db,
            name=name,
            email=email,
            hashed_password=get_password_hash(password),
            avatar=gravatar_url(email),
        )
        logger.info(f"Registered user {user.id}")
        return create_access_token(user.id)

    @staticmethod
    def resolve_token(token: str) -> str:
        """Return the user id carried by a valid token."""
        return verify_token(token).sub

    @staticmethod
    async def get_current_user(db: Session, user_id: str) -> User:
        user = await UserService.get_user(db, user_id)
        if not user:
            raise NotFound("User not found")
        return user
