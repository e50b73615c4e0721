from datetime import datetime
from pydantic import BaseModel


class TokenPayload(BaseModel):
    sub: str  # user id
    exp: datetime
    iat: datetime


# Pydantic models for response
class TokenResponse(BaseModel):
    token: str
