from dataclasses import dataclass, field
from typing import List, Optional

from ..exceptions import ValidationError

MIN_USERNAME_LENGTH = 3


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    password_hash: str
    name: Optional[str] = None
    # Back-reference; Blog.owner_user_id is authoritative
    blog_ids: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Business validations"""
        if not self.username or len(self.username.strip()) < MIN_USERNAME_LENGTH:
            raise ValidationError(
                f"username must be at least {MIN_USERNAME_LENGTH} characters",
                fields=["username"],
            )
        if not self.password_hash:
            raise ValidationError("Password hash is required", fields=["password_hash"])
