"""
Custom exception hierarchy for the blog list backend.

Raised by domain models, use cases and repositories. All errors inherit
from BlogListError and carry a user-facing message; the API layer maps
each subclass to an HTTP status in one place (api/error_handlers.py).
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Iterable, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class BlogListError(Exception):
    """Base exception for all blog list errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(BlogListError):
    """Raised when required input is missing or malformed."""

    def __init__(self, message: str, fields: Optional[Iterable[str]] = None, **kwargs):
        self.fields = list(fields or [])
        details = kwargs.pop("details", None) or {}
        if self.fields:
            details.setdefault("fields", self.fields)
        super().__init__(message, details=details, **kwargs)


# -----------------------------------------------------------------------------
# Authentication / authorization
# -----------------------------------------------------------------------------


class InvalidCredentialsError(BlogListError):
    """Raised when login fails. Never says whether username or password was wrong."""

    def __init__(self):
        super().__init__("invalid username or password")


class UnauthorizedError(BlogListError):
    """Raised when a protected operation is attempted without a token."""

    def __init__(self, message: str = "token missing"):
        super().__init__(message)


class InvalidTokenError(UnauthorizedError):
    """Raised when a token is malformed, tampered with or expired."""

    def __init__(self, message: str = "token invalid"):
        super().__init__(message)


class ForbiddenError(BlogListError):
    """Raised when an authenticated principal may not act on a resource."""
    pass


# -----------------------------------------------------------------------------
# Lookup
# -----------------------------------------------------------------------------


class NotFoundError(BlogListError):
    """Raised when a referenced entity id does not resolve."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(
            f"{entity} {entity_id} not found",
            user_message=f"{entity} not found",
            details={"id": entity_id},
        )
        self.entity = entity
        self.entity_id = entity_id


# -----------------------------------------------------------------------------
# Storage
# -----------------------------------------------------------------------------


class StorageError(BlogListError):
    """Opaque repository failure. Propagated unmodified, not retried here."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        kwargs.setdefault("user_message", "Storage is unavailable. Please try again.")
        super().__init__(message, **kwargs)
        self.operation = operation


class PartialWriteError(BlogListError):
    """
    Raised when a two-step ownership write (blog + owner back-reference)
    could not be confirmed as fully applied.
    """

    def __init__(self, message: str, blog_id: str, rolled_back: bool = False):
        super().__init__(
            message,
            user_message="The blog could not be fully saved. Please try again.",
            details={"blog_id": blog_id, "rolled_back": rolled_back},
        )
        self.blog_id = blog_id
        self.rolled_back = rolled_back
