from .auth_dto import UserLoginRequest, TokenResponse
from .user_dto import UserRegistrationRequest, UserResponse
from .blog_dto import (
    BlogCreateRequest,
    BlogUpdateRequest,
    BlogOwnerSummary,
    BlogResponse,
)
from .statistics_dto import (
    AuthorBlogCountResponse,
    AuthorLikesResponse,
    BlogStatisticsResponse,
)

__all__ = [
    "UserLoginRequest",
    "TokenResponse",
    "UserRegistrationRequest",
    "UserResponse",
    "BlogCreateRequest",
    "BlogUpdateRequest",
    "BlogOwnerSummary",
    "BlogResponse",
    "AuthorBlogCountResponse",
    "AuthorLikesResponse",
    "BlogStatisticsResponse",
]
