# Standard library imports
from typing import Optional

# Local application imports
from ....domain.models.blog import Blog
from ....domain.models.user import User
from ...dto.blog_dto import BlogOwnerSummary, BlogResponse


def to_blog_response(blog: Blog, owner: Optional[User] = None) -> BlogResponse:
    """Build the outbound blog projection; the owner is reduced to username and name"""
    return BlogResponse(
        id=blog.id or "",
        title=blog.title,
        author=blog.author,
        url=blog.url,
        likes=blog.likes,
        owner=BlogOwnerSummary(username=owner.username, name=owner.name) if owner else None,
    )
