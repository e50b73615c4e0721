from typing import Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateEmail, StoreError
from app.models.user import User


class UserService:
    @staticmethod
    async def get_user(db: Session, user_id: str) -> Optional[User]:
        """Get user by ID."""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    async def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get user by normalized email."""
        return db.query(User).filter(User.email == email).first()

    @staticmethod
    async def create_user(
        db: Session, name: str, email: str, hashed_password: str, avatar: str
    ) -> User:
        """Insert a new user record."""
        db_user = User(name=name, email=email, password=hashed_password, avatar=avatar)
        db.add(db_user)
        try:
            db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email
            db.rollback()
            raise DuplicateEmail() from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating user: {str(e)}")
            raise StoreError() from e
        db.refresh(db_user)
        return db_user

    @staticmethod
    async def delete_user(db: Session, user_id: str) -> Optional[User]:
        """Stage deletion of a user; the caller commits."""
        db_user = await UserService.get_user(db, user_id)
        if db_user:
            db.delete(db_user)
        return db_user
