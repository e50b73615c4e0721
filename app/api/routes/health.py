from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import text

from app.core.config import settings
from app.db.database import get_db

router = APIRouter()


@router.get("")
async def health_check(db: Session = Depends(get_db)) -> dict:
    """Check the service and its database connection."""
    database = "healthy"
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {str(e)}")
        database = "unhealthy"

    return {
        "status": "healthy" if database == "healthy" else "degraded",
        "version": settings.VERSION,
        "database": database,
    }
