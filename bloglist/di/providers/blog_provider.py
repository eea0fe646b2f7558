from typing import TYPE_CHECKING
from ...domain.repositories.blog_repository import BlogRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.blog.list_blogs import ListBlogsUseCase
from ...application.use_cases.blog.create_blog import CreateBlogUseCase
from ...application.use_cases.blog.delete_blog import DeleteBlogUseCase
from ...application.use_cases.blog.update_blog import UpdateBlogUseCase
from ...application.use_cases.blog.get_blog_statistics import GetBlogStatisticsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class BlogProvider:
    """Blog use case provider - registers all blog-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all blog use cases.
        Every blog use case needs both repositories: blogs carry the
        owner id and users carry the back-reference list.
        """
        for use_case in (
            ListBlogsUseCase,
            CreateBlogUseCase,
            DeleteBlogUseCase,
            UpdateBlogUseCase,
            GetBlogStatisticsUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    blog_repository=container.get(BlogRepository),
                    user_repository=container.get(UserRepository),
                )
            )
