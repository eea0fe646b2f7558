from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.blog import Blog


class BlogRepository(ABC):
    """Repository interface - defines contract for blog data access"""

    @abstractmethod
    async def find_by_id(self, blog_id: str) -> Optional[Blog]:
        """Find blog by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Blog]:
        """List all blogs in storage order"""
        pass

    @abstractmethod
    async def insert(self, blog: Blog) -> Blog:
        """Insert a new blog and return it with its ID set"""
        pass

    @abstractmethod
    async def update(self, blog: Blog) -> Optional[Blog]:
        """Replace an existing blog's fields. Returns None if it does not exist"""
        pass

    @abstractmethod
    async def delete(self, blog_id: str) -> bool:
        """Delete blog by ID. Returns False if nothing was deleted"""
        pass
