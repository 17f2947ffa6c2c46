"""
Statistics over a list of blogs.

Every function accepts blog-like records, either mappings or objects with
``author`` and ``likes``, never mutates its input and never raises for a
well-formed list. A missing ``likes`` value counts as 0.
"""

from collections.abc import Iterable, Mapping
from typing import Any, TypedDict


class AuthorBlogs(TypedDict):
    author: str
    blogs: int


class AuthorLikes(TypedDict):
    author: str
    likes: int


def _field(blog: Any, name: str, default: Any = None) -> Any:
    if isinstance(blog, Mapping):
        return blog.get(name, default)
    return getattr(blog, name, default)


def _likes(blog: Any) -> int:
    return _field(blog, "likes") or 0


def dummy(blogs: Iterable[Any]) -> int:  # noqa: ARG001
    """Return 1 for any input."""
    return 1


def total_likes(blogs: Iterable[Any]) -> int:
    """
    Sum the likes of every blog.

    Examples:
        >>> total_likes([{"author": "a", "likes": 5}, {"author": "b", "likes": 2}])
        7
        >>> total_likes([])
        0
    """
    return sum(_likes(blog) for blog in blogs)


def most_blogs(blogs: Iterable[Any]) -> AuthorBlogs:
    """
    Find the author with the most blogs.

    The scan runs left to right and a new author only takes the lead when
    its running count is strictly greater than the current maximum, so on a
    tie the author who reached the count first wins.

    Examples:
        >>> most_blogs([{"author": "a"}, {"author": "b"}, {"author": "b"}])
        {'author': 'b', 'blogs': 2}
        >>> most_blogs([])
        {'author': '', 'blogs': 0}
    """
    counts: dict[str, int] = {}
    leader = AuthorBlogs(author="", blogs=0)
    for blog in blogs:
        author = _field(blog, "author", "")
        counts[author] = counts.get(author, 0) + 1
        if counts[author] > leader["blogs"]:
            leader = AuthorBlogs(author=author, blogs=counts[author])
    return leader


def most_likes(blogs: Iterable[Any]) -> AuthorLikes:
    """
    Find the author whose blogs have the most likes in total.

    Ties are resolved the same way as in :func:`most_blogs`.

    Examples:
        >>> most_likes([{"author": "a", "likes": 3}, {"author": "b", "likes": 3}])
        {'author': 'a', 'likes': 3}
        >>> most_likes([])
        {'author': '', 'likes': 0}
    """
    sums: dict[str, int] = {}
    leader = AuthorLikes(author="", likes=0)
    for blog in blogs:
        author = _field(blog, "author", "")
        sums[author] = sums.get(author, 0) + _likes(blog)
        if sums[author] > leader["likes"]:
            leader = AuthorLikes(author=author, likes=sums[author])
    return leader
