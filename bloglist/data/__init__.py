"""Offline analytics over blog collections."""

from bloglist.data.statistics import dummy, most_blogs, most_likes, total_likes

__all__ = ["dummy", "most_blogs", "most_likes", "total_likes"]
