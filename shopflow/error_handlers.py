"""Custom error handlers and exceptions for the application."""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from typing import Union
import uuid

from .logging_config import get_logger

logger = get_logger("error_handlers")


class AppException(Exception):
    """Base exception for application-specific errors."""

    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ResourceNotFoundError(AppException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Union[uuid.UUID, str]):
        super().__init__(
            message=f"{resource} not found",
            status_code=404,
            details={"resource": resource, "identifier": str(identifier)}
        )


class DuplicateResourceError(AppException):
    """Raised when attempting to create a duplicate resource."""

    def __init__(self, resource: str, field: str, value: str, message: str = None):
        super().__init__(
            message=message or f"A {resource.lower()} with this {field} already exists",
            status_code=409,
            details={"resource": resource, "field": field, "value": value}
        )


class AuthenticationError(AppException):
    """Raised when credentials are rejected."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message=message, status_code=401)


async def app_exception_handler(request: Request, exc: AppException):
    """Handler for custom application exceptions."""
    logger.warning(
        f"Application error: {exc.message}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method,
            "details": exc.details
        }
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.message,
            "details": exc.details,
            "path": request.url.path
        }
    )


def _field_path(loc) -> str:
    # "body.sku" -> "sku"
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in ("body", "query", "path"):
        parts = parts[1:]
    return ".".join(parts)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """422 with one entry per rejected field."""
    errors = [
        {"field": _field_path(error["loc"]), "message": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.warning(f"[VALIDATION] {request.method} {request.url.path}: {len(errors)} error(s)")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation failed",
            "validation_errors": errors,
            "path": request.url.path
        }
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    """Constraint violations are conflicts; other database failures are 500s."""
    if isinstance(exc, IntegrityError):
        logger.warning(f"[DB] Constraint violated on {request.method} {request.url.path}: {exc.orig}")
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"error": "Conflicts with an existing record", "path": request.url.path}
        )

    logger.error(f"[DB] {type(exc).__name__} on {request.method} {request.url.path}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Database error", "path": request.url.path}
    )


async def generic_exception_handler(request: Request, exc: Exception):
    logger.critical(f"[UNHANDLED] {type(exc).__name__} on {request.method} {request.url.path}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "path": request.url.path}
    )
