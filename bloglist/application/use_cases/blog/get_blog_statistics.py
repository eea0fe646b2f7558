# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.blog_statistics import (
    total_likes,
    favorite_blog,
    most_blogs,
    most_likes,
)
from ...dto.statistics_dto import (
    AuthorBlogCountResponse,
    AuthorLikesResponse,
    BlogStatisticsResponse,
)
from .blog_mapper import to_blog_response


class GetBlogStatisticsUseCase:
    """Use case for computing aggregate statistics over all blogs"""

    def __init__(self, blog_repository: BlogRepository, user_repository: UserRepository) -> None:
        self.blog_repository = blog_repository
        self.user_repository = user_repository

    async def execute(self) -> BlogStatisticsResponse:
        blogs = await self.blog_repository.list_all()

        favorite = favorite_blog(blogs)
        top_by_count = most_blogs(blogs)
        top_by_likes = most_likes(blogs)

        favorite_response = None
        if favorite is not None:
            owner = await self.user_repository.find_by_id(favorite.owner_user_id)
            favorite_response = to_blog_response(favorite, owner)

        return BlogStatisticsResponse(
            total_likes=total_likes(blogs),
            favorite_blog=favorite_response,
            most_blogs=(
                AuthorBlogCountResponse(author=top_by_count.author, count=top_by_count.count)
                if top_by_count else None
            ),
            most_likes=(
                AuthorLikesResponse(author=top_by_likes.author, likes=top_by_likes.likes)
                if top_by_likes else None
            ),
        )
