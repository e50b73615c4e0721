"""Domain errors raised by the services and rendered by the API layer.

Every error carries the HTTP status it maps to and renders its own
client-facing body, so handlers never expose internal details.
"""
from typing import Any, Dict, List, Optional

from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        return {"msg": self.message}


class ValidationError(AppError):
    """Malformed or missing input, reported field by field."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"

    def __init__(self, errors: List[Dict[str, Any]]):
        super().__init__(errors[0]["msg"] if errors else None)
        self.errors = errors

    @classmethod
    def from_pydantic(cls, errors) -> "ValidationError":
        items = []
        for err in errors:
            if err.get("type") == "json_invalid":
                # Decoder text and character offsets stay server-side
                items.append({"msg": "Invalid JSON body", "param": "body", "location": "body"})
                continue
            loc = [str(part) for part in err.get("loc", ())]
            ctx = err.get("ctx") or {}
            # Messages raised from field validators are used verbatim
            msg = str(ctx["error"]) if "error" in ctx else err.get("msg", "Invalid value")
            items.append({
                "msg": msg,
                "param": loc[-1] if len(loc) > 1 else (loc[0] if loc else ""),
                "location": loc[0] if loc else "body",
            })
        return cls(items)

    def to_body(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class InvalidCredentials(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid email or password"

    def to_body(self) -> Dict[str, Any]:
        return {"errors": [{"msg": self.message}]}


class DuplicateEmail(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists"

    def to_body(self) -> Dict[str, Any]:
        return {"errors": [{"msg": self.message}]}


class InvalidToken(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Token is not valid"


class MissingToken(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "No token, authorization denied"


class NotFound(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Not found"


class StoreError(AppError):
    """Unexpected database failure."""
