# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.principal import Principal
from ....domain.exceptions import (
    ForbiddenError,
    NotFoundError,
    PartialWriteError,
    StorageError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)


class DeleteBlogUseCase:
    """Use case for deleting a blog by its owner"""

    def __init__(self, blog_repository: BlogRepository, user_repository: UserRepository) -> None:
        self.blog_repository = blog_repository
        self.user_repository = user_repository

    async def execute(self, principal: Optional[Principal], blog_id: str) -> None:
        """
        Delete a blog and drop it from its owner's blog_ids

        Args:
            principal: Resolved principal of the request, None if unauthenticated
            blog_id: ID of the blog

        Raises:
            UnauthorizedError: If there is no principal
            NotFoundError: If the blog does not exist
            ForbiddenError: If the principal does not own the blog
            PartialWriteError: If the blog was deleted but the back-reference was not
        """
        if principal is None:
            raise UnauthorizedError()

        blog = await self.blog_repository.find_by_id(blog_id)
        if blog is None:
            raise NotFoundError("Blog", blog_id)

        if blog.owner_user_id != principal.user_id:
            logger.warning("User %s tried to delete blog %s owned by %s", principal.user_id, blog_id, blog.owner_user_id)
            raise ForbiddenError(f"Blog {blog_id} does not belong to user {principal.user_id}")

        if not await self.blog_repository.delete(blog_id):
            # Deleted concurrently
            raise NotFoundError("Blog", blog_id)

        try:
            await self.user_repository.remove_blog(blog.owner_user_id, blog_id)
        except StorageError as exception:
            logger.error("Blog %s deleted but still listed on owner %s: %s", blog_id, blog.owner_user_id, exception)
            raise PartialWriteError(
                f"Blog {blog_id} was deleted but could not be unlinked from its owner: {str(exception)}",
                blog_id=blog_id,
            )

        logger.info("User %s deleted blog %s", principal.user_id, blog_id)
