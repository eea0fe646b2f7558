"""
Maps the domain exception hierarchy to HTTP responses.

Every BlogListError raised by a dependency, use case or repository ends up
here, so the process never crashes on an invariant violation and the body
shape is the same everywhere: {"error": ..., "details": {...}}.
"""
# Standard library imports
import logging
from typing import Dict, Type

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ..domain.exceptions import (
    BlogListError,
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
    PartialWriteError,
    StorageError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order, so subclasses must come before their bases
STATUS_CODES: Dict[Type[BlogListError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    PartialWriteError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    StorageError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_code_for(exception: BlogListError) -> int:
    for exception_type, status_code in STATUS_CODES.items():
        if isinstance(exception, exception_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def blog_list_error_handler(request: Request, exc: BlogListError) -> JSONResponse:
    """Handle all domain errors"""
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}")

    content = {"error": exc.user_message}
    if exc.details:
        content["details"] = exc.details

    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown routes get the same error shape as domain errors"""
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return JSONResponse(status_code=exc.status_code, content={"error": "unknown endpoint"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Malformed request bodies get the ValidationError shape and status

    The message is built from the first failing field, e.g.
    "password: String should have at least 3 characters".
    """
    errors = exc.errors()
    # loc starts with "body", "query" or "path"
    locations = [".".join(str(part) for part in error.get("loc", ())[1:]) for error in errors]
    fields = list(dict.fromkeys(location for location in locations if location))

    message = "invalid request"
    if errors:
        first_message = errors[0].get("msg")
        message = f"{locations[0]}: {first_message}" if locations[0] else str(first_message)

    logger.info(f"RequestValidationError in {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message, "details": {"fields": fields}},
    )


def register_error_handlers(application: FastAPI) -> None:
    application.add_exception_handler(BlogListError, blog_list_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
