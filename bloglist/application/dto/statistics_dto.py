from typing import Optional

from pydantic import BaseModel

from .blog_dto import BlogResponse


class AuthorBlogCountResponse(BaseModel):
    author: Optional[str] = None
    count: int


class AuthorLikesResponse(BaseModel):
    author: Optional[str] = None
    likes: int


class BlogStatisticsResponse(BaseModel):
    """Aggregates over all blogs; the optional fields are null when there are no blogs"""
    total_likes: int = 0
    favorite_blog: Optional[BlogResponse] = None
    most_blogs: Optional[AuthorBlogCountResponse] = None
    most_likes: Optional[AuthorLikesResponse] = None
