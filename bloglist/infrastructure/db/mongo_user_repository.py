# Standard library imports
from typing import Iterable, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import StorageError, ValidationError
from .mongo_connection import get_user_collection


def _to_object_id(value: str) -> Optional[ObjectId]:
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def ensure_indexes(self) -> None:
        """Create the unique username index"""
        try:
            await self.user_collection.create_index(UserFields.USERNAME, unique=True)
        except PyMongoError as e:
            raise StorageError(f"Error creating user indexes: {str(e)}", operation="ensure_indexes")

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by exact username

        Args:
            username: Username to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username})
        except PyMongoError as e:
            raise StorageError(f"Error finding user by username: {str(e)}", operation="find_by_username")
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (also for malformed IDs)
        """
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise StorageError(f"Error finding user by ID: {str(e)}", operation="find_by_id")
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        """Find all users whose ID is in user_ids; malformed IDs are skipped"""
        object_ids = [oid for oid in (_to_object_id(uid) for uid in set(user_ids)) if oid is not None]
        if not object_ids:
            return []

        try:
            cursor = self.user_collection.find({UserFields.MONGO_ID: {"$in": object_ids}})
            return [self._document_to_user(document) async for document in cursor]
        except PyMongoError as e:
            raise StorageError(f"Error finding users by ID: {str(e)}", operation="find_by_ids")

    async def list_all(self) -> List[User]:
        """List all users in natural order"""
        try:
            cursor = self.user_collection.find({})
            return [self._document_to_user(document) async for document in cursor]
        except PyMongoError as e:
            raise StorageError(f"Error listing users: {str(e)}", operation="list_all")

    async def insert(self, user: User) -> User:
        """
        Insert a new user

        Args:
            user: User domain model to insert (its id is ignored)

        Returns:
            Inserted User domain model with ID set

        Raises:
            ValidationError: If the username is already taken
            StorageError: On any other database failure
        """
        user_dict = self._user_to_dict(user)

        try:
            result = await self.user_collection.insert_one(user_dict)
            document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except DuplicateKeyError:
            raise ValidationError("username must be unique", fields=["username"])
        except PyMongoError as e:
            raise StorageError(f"Error inserting user: {str(e)}", operation="insert")

        if document is None:
            raise StorageError("User was inserted but could not be retrieved", operation="insert")
        return self._document_to_user(document)

    async def add_blog(self, user_id: str, blog_id: str) -> bool:
        """Add blog_id to the user's blog_ids ($addToSet, idempotent)"""
        return await self._update_blog_ids(user_id, {"$addToSet": {UserFields.BLOG_IDS: blog_id}}, "add_blog")

    async def remove_blog(self, user_id: str, blog_id: str) -> bool:
        """Remove blog_id from the user's blog_ids ($pull, idempotent)"""
        return await self._update_blog_ids(user_id, {"$pull": {UserFields.BLOG_IDS: blog_id}}, "remove_blog")

    async def _update_blog_ids(self, user_id: str, update: dict, operation: str) -> bool:
        object_id = _to_object_id(user_id)
        if object_id is None:
            return False

        try:
            result = await self.user_collection.update_one({UserFields.MONGO_ID: object_id}, update)
        except PyMongoError as e:
            raise StorageError(f"Error updating blog references of user {user_id}: {str(e)}", operation=operation)
        return result.matched_count > 0

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise StorageError("Invalid user document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            name=document.get(UserFields.NAME),
            password_hash=document.get(UserFields.PASSWORD_HASH, ""),
            blog_ids=[str(blog_id) for blog_id in document.get(UserFields.BLOG_IDS, [])],
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document (without _id)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.USERNAME: user.username,
            UserFields.NAME: user.name,
            UserFields.PASSWORD_HASH: user.password_hash,
            UserFields.BLOG_IDS: list(user.blog_ids),
        }
