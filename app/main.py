import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from app.api.routes import health
from app.api.routes import router as api_router
from app.core.config import settings
from app.core.exceptions import AppError, StoreError, ValidationError
from app.core.logging import setup_logging
from app.db.database import close_db, init_db

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.PROJECT_NAME}...")
    init_db()
    logger.info("Database tables ready")

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}...")
    close_db()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Developer network API: accounts, authentication and profiles",
    version=settings.VERSION,
    lifespan=lifespan,
)

# CORS middleware configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log request timing and status"""
    start_time = time.time()
    response = await call_next(request)
    logger.info(
        f"{request.method} {request.url.path} "
        f"Status: {response.status_code} "
        f"Duration: {(time.time() - start_time):.3f}s"
    )
    return response


# Include routers
app.include_router(api_router, prefix=settings.API_PREFIX)
app.include_router(health.router, prefix="/health", tags=["health"])


@app.get("/")
async def root():
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
    }


# Error handlers
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if isinstance(exc, StoreError):
        logger.error(f"Store failure on {request.method} {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = ValidationError.from_pydantic(exc.errors())
    return JSONResponse(status_code=error.status_code, content=error.to_body())


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions"""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=StoreError().to_body())
