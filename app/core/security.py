import hashlib
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Union
from urllib.parse import urlencode

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import settings
from app.core.exceptions import InvalidToken
from app.schemas.token import TokenPayload

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

GRAVATAR_URL = "https://www.gravatar.com/avatar/"
GRAVATAR_OPTIONS = {"s": "200", "r": "pg", "d": "mm"}


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Generate a salted password hash from a plain password."""
    return pwd_context.hash(password)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def gravatar_url(email: str) -> str:
    """Deterministic avatar URL for an email address."""
    digest = hashlib.md5(normalize_email(email).encode("utf-8")).hexdigest()
    return f"{GRAVATAR_URL}{digest}?{urlencode(GRAVATAR_OPTIONS)}"


def create_access_token(
    subject: Union[str, Any], expires_delta: Optional[timedelta] = None
) -> str:
    """Create a signed access token for the given user id."""
    current_time = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": str(subject),
        "exp": int((current_time + expires_delta).timestamp()),
        "iat": int(current_time.timestamp()),
        "jti": str(uuid.uuid4()),
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> TokenPayload:
    """Verify signature and expiry, and decode the token payload."""
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise InvalidToken() from e

    if not payload["sub"]:
        raise InvalidToken()

    return TokenPayload(
        sub=payload["sub"],
        exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        iat=datetime.fromtimestamp(payload.get("iat", payload["exp"]), tz=timezone.utc),
    )
