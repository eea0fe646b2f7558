# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.blog_repository import BlogRepository
from ...domain.models.blog import Blog
from ...domain.constants import BlogFields
from ...domain.exceptions import StorageError
from .mongo_connection import get_blog_collection


class MongoBlogRepository(BlogRepository):
    """MongoDB implementation of BlogRepository"""

    def __init__(self, blog_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.blog_collection = blog_collection if blog_collection is not None else get_blog_collection()

    async def find_by_id(self, blog_id: str) -> Optional[Blog]:
        """Find blog by ID. Malformed IDs resolve to None"""
        object_id = self._object_id(blog_id)
        if object_id is None:
            return None

        try:
            document = await self.blog_collection.find_one({BlogFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise StorageError(f"Error finding blog by ID: {str(e)}", operation="find_by_id")
        if document is None:
            return None
        return self._document_to_blog(document)

    async def list_all(self) -> List[Blog]:
        """List all blogs in natural order"""
        try:
            cursor = self.blog_collection.find({})
            return [self._document_to_blog(document) async for document in cursor]
        except PyMongoError as e:
            raise StorageError(f"Error listing blogs: {str(e)}", operation="list_all")

    async def insert(self, blog: Blog) -> Blog:
        """Insert a new blog"""
        blog_dict = self._blog_to_dict(blog)
        try:
            result = await self.blog_collection.insert_one(blog_dict)
            new_document = await self.blog_collection.find_one({BlogFields.MONGO_ID: result.inserted_id})
        except PyMongoError as e:
            raise StorageError(f"Error inserting blog: {str(e)}", operation="insert")

        if new_document is None:
            raise StorageError("Blog was created but could not be retrieved", operation="insert")
        return self._document_to_blog(new_document)

    async def update(self, blog: Blog) -> Optional[Blog]:
        """Replace title, author, url and likes of an existing blog"""
        object_id = self._object_id(blog.id)
        if object_id is None:
            return None

        blog_dict = self._blog_to_dict(blog)
        # owner is set once at creation
        blog_dict.pop(BlogFields.OWNER_USER_ID, None)
        try:
            document = await self.blog_collection.find_one_and_update(
                {BlogFields.MONGO_ID: object_id},
                {"$set": blog_dict},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise StorageError(f"Error updating blog: {str(e)}", operation="update")

        if document is None:
            return None
        return self._document_to_blog(document)

    async def delete(self, blog_id: str) -> bool:
        """Delete blog by ID"""
        object_id = self._object_id(blog_id)
        if object_id is None:
            return False

        try:
            result = await self.blog_collection.delete_one({BlogFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise StorageError(f"Error deleting blog: {str(e)}", operation="delete")
        return result.deleted_count > 0

    @staticmethod
    def _object_id(blog_id: Optional[str]) -> Optional[ObjectId]:
        if not blog_id:
            return None
        try:
            return ObjectId(blog_id)
        except (InvalidId, ValueError, TypeError):
            return None

    def _document_to_blog(self, document: Dict[str, Any]) -> Blog:
        """Convert MongoDB document to Blog domain model"""
        if not document or BlogFields.MONGO_ID not in document:
            raise StorageError("Invalid blog document: missing _id field")

        return Blog(
            id=str(document[BlogFields.MONGO_ID]),
            title=document.get(BlogFields.TITLE, ""),
            url=document.get(BlogFields.URL, ""),
            author=document.get(BlogFields.AUTHOR),
            likes=int(document.get(BlogFields.LIKES) or 0),
            owner_user_id=str(document.get(BlogFields.OWNER_USER_ID, "")),
        )

    def _blog_to_dict(self, blog: Blog) -> Dict[str, Any]:
        """Convert Blog domain model to MongoDB document (without _id)"""
        return {
            BlogFields.TITLE: blog.title,
            BlogFields.AUTHOR: blog.author,
            BlogFields.URL: blog.url,
            BlogFields.LIKES: blog.likes,
            BlogFields.OWNER_USER_ID: blog.owner_user_id,
        }
