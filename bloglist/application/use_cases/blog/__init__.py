from .list_blogs import ListBlogsUseCase
from .create_blog import CreateBlogUseCase
from .delete_blog import DeleteBlogUseCase
from .update_blog import UpdateBlogUseCase
from .get_blog_statistics import GetBlogStatisticsUseCase

__all__ = [
    "ListBlogsUseCase",
    "CreateBlogUseCase",
    "DeleteBlogUseCase",
    "UpdateBlogUseCase",
    "GetBlogStatisticsUseCase",
]
