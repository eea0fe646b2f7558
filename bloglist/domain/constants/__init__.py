"""Constants for domain model field names"""

from .user_fields import UserFields
from .blog_fields import BlogFields
from .token_claims import TokenClaims

__all__ = [
    "UserFields",
    "BlogFields",
    "TokenClaims",
]
