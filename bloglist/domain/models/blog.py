# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ..exceptions import ValidationError

# Largest value a BSON int64 can hold
MAX_LIKES = 2 ** 63 - 1


@dataclass
class Blog:
    """
    Pure domain model for a blog post.

    A blog always has exactly one owner. The owner id is set when the blog
    is created and is never reassigned afterwards.
    """
    id: Optional[str]
    title: str
    url: str
    owner_user_id: str
    author: Optional[str] = None
    likes: int = 0

    def __post_init__(self) -> None:
        """Business validations"""
        missing = [
            name for name in ("title", "url")
            if not getattr(self, name) or not str(getattr(self, name)).strip()
        ]
        if missing:
            raise ValidationError(f"{' and '.join(missing)} required", fields=missing)
        if not self.owner_user_id:
            raise ValidationError("Owner user ID is required", fields=["owner_user_id"])
        if self.likes < 0:
            raise ValidationError("likes must not be negative", fields=["likes"])
        if self.likes > MAX_LIKES:
            raise ValidationError("likes is too large", fields=["likes"])
