# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.blog_dto import BlogResponse
from .blog_mapper import to_blog_response


class ListBlogsUseCase:
    """Use case for listing all blogs with a summary of their owner"""

    def __init__(self, blog_repository: BlogRepository, user_repository: UserRepository) -> None:
        self.blog_repository = blog_repository
        self.user_repository = user_repository

    async def execute(self) -> List[BlogResponse]:
        """
        List all blogs in storage order (no sorting is applied)

        Returns:
            List of BlogResponse objects, each with owner {username, name},
            or owner None if the owner no longer exists
        """
        blogs = await self.blog_repository.list_all()
        if not blogs:
            return []

        owners = await self.user_repository.find_by_ids({blog.owner_user_id for blog in blogs})
        owners_by_id = {owner.id: owner for owner in owners}

        return [to_blog_response(blog, owners_by_id.get(blog.owner_user_id)) for blog in blogs]
