"""
In-memory repositories for tests. Insertion order is storage order.
"""
import uuid
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Set

from bloglist.domain.exceptions import StorageError, ValidationError
from bloglist.domain.models.blog import Blog
from bloglist.domain.models.user import User
from bloglist.domain.repositories.blog_repository import BlogRepository
from bloglist.domain.repositories.user_repository import UserRepository


def _new_id() -> str:
    return uuid.uuid4().hex[:24]


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        # Operation names that raise StorageError, e.g. {"add_blog"}
        self.failing: Set[str] = set()

    def _check(self, operation: str) -> None:
        if operation in self.failing:
            raise StorageError(f"simulated failure in {operation}", operation=operation)

    async def find_by_username(self, username: str) -> Optional[User]:
        self._check("find_by_username")
        for user in self.users.values():
            if user.username == username:
                return replace(user, blog_ids=list(user.blog_ids))
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        self._check("find_by_id")
        user = self.users.get(user_id)
        return replace(user, blog_ids=list(user.blog_ids)) if user else None

    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        self._check("find_by_ids")
        wanted = set(user_ids)
        return [replace(u, blog_ids=list(u.blog_ids)) for uid, u in self.users.items() if uid in wanted]

    async def list_all(self) -> List[User]:
        self._check("list_all")
        return [replace(u, blog_ids=list(u.blog_ids)) for u in self.users.values()]

    async def insert(self, user: User) -> User:
        self._check("insert")
        for existing in self.users.values():
            if existing.username == user.username:
                raise ValidationError("username must be unique", fields=["username"])
        saved = replace(user, id=_new_id(), blog_ids=list(user.blog_ids))
        self.users[saved.id] = saved
        return replace(saved, blog_ids=list(saved.blog_ids))

    async def add_blog(self, user_id: str, blog_id: str) -> bool:
        self._check("add_blog")
        user = self.users.get(user_id)
        if user is None:
            return False
        if blog_id not in user.blog_ids:
            user.blog_ids.append(blog_id)
        return True

    async def remove_blog(self, user_id: str, blog_id: str) -> bool:
        self._check("remove_blog")
        user = self.users.get(user_id)
        if user is None:
            return False
        user.blog_ids = [b for b in user.blog_ids if b != blog_id]
        return True


class InMemoryBlogRepository(BlogRepository):
    def __init__(self) -> None:
        self.blogs: Dict[str, Blog] = {}
        self.failing: Set[str] = set()

    def _check(self, operation: str) -> None:
        if operation in self.failing:
            raise StorageError(f"simulated failure in {operation}", operation=operation)

    async def find_by_id(self, blog_id: str) -> Optional[Blog]:
        self._check("find_by_id")
        return self.blogs.get(blog_id)

    async def list_all(self) -> List[Blog]:
        self._check("list_all")
        return list(self.blogs.values())

    async def insert(self, blog: Blog) -> Blog:
        self._check("insert")
        saved = replace(blog, id=_new_id())
        self.blogs[saved.id] = saved
        return saved

    async def update(self, blog: Blog) -> Optional[Blog]:
        self._check("update")
        existing = self.blogs.get(blog.id)
        if existing is None:
            return None
        saved = replace(blog, owner_user_id=existing.owner_user_id)
        self.blogs[blog.id] = saved
        return saved

    async def delete(self, blog_id: str) -> bool:
        self._check("delete")
        return self.blogs.pop(blog_id, None) is not None
