from .user import User
from .blog import Blog
from .principal import Principal

__all__ = ["User", "Blog", "Principal"]
