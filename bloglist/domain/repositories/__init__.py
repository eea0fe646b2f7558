from .user_repository import UserRepository
from .blog_repository import BlogRepository

__all__ = ["UserRepository", "BlogRepository"]
