from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by exact username"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        """Find all users whose ID is in user_ids"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """List all users in storage order"""
        pass

    @abstractmethod
    async def insert(self, user: User) -> User:
        """Insert a new user; the repository assigns the ID"""
        pass

    @abstractmethod
    async def add_blog(self, user_id: str, blog_id: str) -> bool:
        """
        Add blog_id to the user's blog_ids if not already present.
        Idempotent. Returns False if the user does not exist.
        """
        pass

    @abstractmethod
    async def remove_blog(self, user_id: str, blog_id: str) -> bool:
        """
        Remove blog_id from the user's blog_ids.
        Idempotent. Returns False if the user does not exist.
        """
        pass

    async def ensure_indexes(self) -> None:
        """Create storage indexes (unique username). No-op by default."""
        return None
