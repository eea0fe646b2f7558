"""
Blog statistics
---------------

Pure aggregation functions over a sequence of blogs. Each input item only
needs ``author`` and ``likes`` attributes, so domain ``Blog`` objects and
response DTOs both work.

Tie-break rule shared by every function: items (or authors, for the
grouped functions) are visited in first-seen order and the current leader
is only replaced by a strictly greater value. Equal values never displace
an earlier leader.
"""
# Standard library imports
from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Sequence, TypeVar


class Likeable(Protocol):
    author: Optional[str]
    likes: int


BlogT = TypeVar("BlogT", bound=Likeable)


@dataclass(frozen=True)
class AuthorBlogCount:
    author: Optional[str]
    count: int


@dataclass(frozen=True)
class AuthorLikes:
    author: Optional[str]
    likes: int


def total_likes(blogs: Sequence[Likeable]) -> int:
    """Sum of likes over all blogs, 0 for an empty sequence."""
    total = 0
    for blog in blogs:
        total += blog.likes
    return total


def favorite_blog(blogs: Sequence[BlogT]) -> Optional[BlogT]:
    """
    Blog with the most likes.

    Returns:
        The first blog (in input order) holding the maximum, or None when
        blogs is empty
    """
    favorite: Optional[BlogT] = None
    for blog in blogs:
        if favorite is None or blog.likes > favorite.likes:
            favorite = blog
    return favorite


def _leader(totals: Dict[Optional[str], int]) -> Optional[tuple]:
    # dicts keep insertion order, i.e. first-seen author order
    leader = None
    for author, value in totals.items():
        if leader is None or value > leader[1]:
            leader = (author, value)
    return leader


def most_blogs(blogs: Sequence[Likeable]) -> Optional[AuthorBlogCount]:
    """Author with the most blogs, or None when blogs is empty."""
    counts: Dict[Optional[str], int] = {}
    for blog in blogs:
        counts[blog.author] = counts.get(blog.author, 0) + 1

    leader = _leader(counts)
    if leader is None:
        return None
    return AuthorBlogCount(author=leader[0], count=leader[1])


def most_likes(blogs: Sequence[Likeable]) -> Optional[AuthorLikes]:
    """Author whose blogs have the most likes in total, or None when blogs is empty."""
    sums: Dict[Optional[str], int] = {}
    for blog in blogs:
        sums[blog.author] = sums.get(blog.author, 0) + blog.likes

    leader = _leader(sums)
    if leader is None:
        return None
    return AuthorLikes(author=leader[0], likes=leader[1])
