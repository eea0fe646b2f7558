from typing import Optional, Union

from pydantic import BaseModel


class BlogCreateRequest(BaseModel):
    """
    DTO for blog creation request.

    title and url are checked by the use case so that a missing field is
    reported by name rather than as a schema error.
    """
    title: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None
    likes: Optional[int] = None


class BlogUpdateRequest(BaseModel):
    """DTO for blog update request. Only fields that are sent get replaced"""
    title: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None
    likes: Optional[Union[int, float, str]] = None  # coerced to int by the use case


class BlogOwnerSummary(BaseModel):
    """Read-only projection of a blog's owner"""
    username: str
    name: Optional[str] = None


class BlogResponse(BaseModel):
    """DTO for blog response"""
    id: str
    title: str
    author: Optional[str] = None
    url: str
    likes: int = 0
    owner: Optional[BlogOwnerSummary] = None
