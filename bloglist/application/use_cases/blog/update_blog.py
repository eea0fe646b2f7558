# Standard library imports
import dataclasses
import logging
from typing import Any, Dict

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError, ValidationError
from ...dto.blog_dto import BlogUpdateRequest, BlogResponse
from .blog_mapper import to_blog_response

logger = logging.getLogger(__name__)


class UpdateBlogUseCase:
    """
    Use case for replacing a blog's title, author, url and likes.

    Requires no principal, unlike create and delete. See DESIGN.md.
    """

    def __init__(self, blog_repository: BlogRepository, user_repository: UserRepository) -> None:
        self.blog_repository = blog_repository
        self.user_repository = user_repository

    async def execute(self, blog_id: str, request: BlogUpdateRequest) -> BlogResponse:
        """
        Update a blog

        Args:
            blog_id: ID of the blog
            request: Fields to replace; fields not sent are kept

        Returns:
            BlogResponse with the updated blog

        Raises:
            NotFoundError: If the blog does not exist
            ValidationError: If likes is not an integer, or the result would
                have an empty title or url
        """
        blog = await self.blog_repository.find_by_id(blog_id)
        if blog is None:
            raise NotFoundError("Blog", blog_id)

        changes: Dict[str, Any] = request.model_dump(exclude_unset=True)
        if "likes" in changes:
            changes["likes"] = self._coerce_likes(changes["likes"])

        # replace() re-runs the model validations
        updated = dataclasses.replace(blog, **changes)

        saved_blog = await self.blog_repository.update(updated)
        if saved_blog is None:
            raise NotFoundError("Blog", blog_id)

        logger.info("Updated blog %s (%s)", blog_id, ", ".join(sorted(changes)) or "no changes")
        owner = await self.user_repository.find_by_id(saved_blog.owner_user_id)
        return to_blog_response(saved_blog, owner)

    @staticmethod
    def _coerce_likes(value: Any) -> int:
        if value is None:
            return 0
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError):
            raise ValidationError(f"likes must be an integer, got {value!r}", fields=["likes"])
