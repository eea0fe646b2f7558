from .credential_hasher import CredentialHasher
from .token_codec import TokenCodec
from .blog_statistics import (
    AuthorBlogCount,
    AuthorLikes,
    total_likes,
    favorite_blog,
    most_blogs,
    most_likes,
)

__all__ = [
    "CredentialHasher",
    "TokenCodec",
    "AuthorBlogCount",
    "AuthorLikes",
    "total_likes",
    "favorite_blog",
    "most_blogs",
    "most_likes",
]
