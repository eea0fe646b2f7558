from .mongo_connection import get_database, close_database, get_user_collection, get_blog_collection
from .mongo_user_repository import MongoUserRepository
from .mongo_blog_repository import MongoBlogRepository

__all__ = [
    "get_database",
    "close_database",
    "get_user_collection",
    "get_blog_collection",
    "MongoUserRepository",
    "MongoBlogRepository",
]
