# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.blog import Blog
from ....domain.models.principal import Principal
from ....domain.exceptions import InvalidTokenError, PartialWriteError, StorageError, UnauthorizedError
from ...dto.blog_dto import BlogCreateRequest, BlogResponse
from .blog_mapper import to_blog_response

logger = logging.getLogger(__name__)


class CreateBlogUseCase:
    """Use case for creating a blog owned by the authenticated principal"""

    def __init__(self, blog_repository: BlogRepository, user_repository: UserRepository) -> None:
        self.blog_repository = blog_repository
        self.user_repository = user_repository

    async def execute(
        self,
        principal: Optional[Principal],
        request: BlogCreateRequest,
    ) -> BlogResponse:
        """
        Create a new blog

        The blog is inserted first, then its id is added to the owner's
        blog_ids. If the second write fails the inserted blog is deleted
        again (best effort) and PartialWriteError is raised.

        Args:
            principal: Resolved principal of the request, None if unauthenticated
            request: Blog creation request

        Returns:
            BlogResponse with created blog information

        Raises:
            UnauthorizedError: If there is no principal
            InvalidTokenError: If the principal's user no longer exists
            ValidationError: If title and/or url are missing
            PartialWriteError: If the owner back-reference could not be written
        """
        if principal is None:
            raise UnauthorizedError()

        # Validated by the domain model before anything is written
        new_blog = Blog(
            id=None,  # Will be set by repository
            title=request.title or "",
            url=request.url or "",
            author=request.author,
            likes=request.likes or 0,
            owner_user_id=principal.user_id,
        )

        owner = await self.user_repository.find_by_id(principal.user_id)
        if owner is None:
            # Token outlived its user
            raise InvalidTokenError(f"token invalid: user {principal.user_id} no longer exists")

        saved_blog = await self.blog_repository.insert(new_blog)
        blog_id = saved_blog.id or ""

        try:
            linked = await self.user_repository.add_blog(principal.user_id, blog_id)
            failure = None if linked else f"user {principal.user_id} not found"
        except StorageError as exception:
            failure = str(exception)

        if failure is not None:
            logger.error("Blog %s saved but not linked to owner %s: %s", blog_id, principal.user_id, failure)
            rolled_back = await self._rollback(blog_id)
            raise PartialWriteError(
                f"Blog {blog_id} could not be linked to its owner: {failure}",
                blog_id=blog_id,
                rolled_back=rolled_back,
            )

        logger.info("User %s created blog %s", principal.user_id, blog_id)
        return to_blog_response(saved_blog, owner)

    async def _rollback(self, blog_id: str) -> bool:
        try:
            return await self.blog_repository.delete(blog_id)
        except StorageError as exception:
            logger.error("Rollback of blog %s failed: %s", blog_id, exception)
            return False
