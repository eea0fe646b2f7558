from .auth import (
    LoginUserUseCase,
    ResolvePrincipalUseCase,
    RegisterUserUseCase,
)
from .user import ListUsersUseCase
from .blog import (
    ListBlogsUseCase,
    CreateBlogUseCase,
    DeleteBlogUseCase,
    UpdateBlogUseCase,
    GetBlogStatisticsUseCase,
)

__all__ = [
    "LoginUserUseCase",
    "ResolvePrincipalUseCase",
    "RegisterUserUseCase",
    "ListUsersUseCase",
    "ListBlogsUseCase",
    "CreateBlogUseCase",
    "DeleteBlogUseCase",
    "UpdateBlogUseCase",
    "GetBlogStatisticsUseCase",
]
