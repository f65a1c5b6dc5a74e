"""
FastAPI application for the ShopFlow inventory dashboard.

To run: uvicorn shopflow.main:app --reload
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from shopflow.api.v1 import api_router
from shopflow.api.v1.auth import register_user
from shopflow.core.config import settings
from shopflow.core.database import init_db, close_db, get_db_context
from shopflow.error_handlers import (
    AppException,
    app_exception_handler,
    validation_exception_handler,
    sqlalchemy_exception_handler,
    generic_exception_handler
)
from shopflow.logging_config import setup_logging
from shopflow.middleware import limiter, RequestLoggingMiddleware, rate_limit_exceeded_handler
from shopflow.models.user import User
from shopflow.schemas.user import SignUpRequest

logger = setup_logging(
    settings.log_level,
    log_file=settings.log_file,
    max_bytes=settings.log_max_bytes,
    backup_count=settings.log_backup_count
)


def seed_demo_user() -> None:
    """Create the demo account once per process."""
    with get_db_context() as db:
        if db.scalar(select(User).where(User.email == settings.demo_user_email)):
            return
        register_user(db, SignUpRequest(
            email=settings.demo_user_email,
            password=settings.demo_user_password,
            name=settings.demo_user_name,
            shop_name=settings.demo_shop_name
        ))
    logger.info(f"Demo account ready: {settings.demo_user_email}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    init_db()
    if settings.seed_demo_user:
        seed_demo_user()

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    close_db()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="ShopFlow - Inventory, Categories, Dashboard & Analytics",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)

    app.add_middleware(RequestLoggingMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(api_router)

    @app.get("/")
    def root():
        """Root endpoint with API information."""
        return {
            "app": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "api_v1": "/api/v1"
        }

    @app.get("/health")
    def health_check():
        """Simple health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "shopflow.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
