"""Tests for bloglist/data/statistics.py."""

from types import SimpleNamespace
from uuid import uuid4

import pytest

from bloglist.data import dummy, most_blogs, most_likes, total_likes
from bloglist.models import BlogDB

BLOGS = [
    {"title": "React patterns", "author": "Michael Chan", "likes": 7},
    {"title": "Go To Statement Considered Harmful", "author": "Edsger W. Dijkstra", "likes": 5},
    {"title": "Canonical string reduction", "author": "Edsger W. Dijkstra", "likes": 12},
    {"title": "First class tests", "author": "Robert C. Martin", "likes": 10},
    {"title": "TDD harms architecture", "author": "Robert C. Martin", "likes": 0},
    {"title": "Type wars", "author": "Robert C. Martin", "likes": 2},
]


class TestDummy:
    def test_returns_one(self) -> None:
        assert dummy([]) == 1
        assert dummy(BLOGS) == 1


class TestTotalLikes:
    def test_empty_list_is_zero(self) -> None:
        assert total_likes([]) == 0

    def test_single_blog_equals_its_likes(self) -> None:
        assert total_likes(BLOGS[:1]) == 7

    def test_bigger_list(self) -> None:
        assert total_likes(BLOGS) == 36

    def test_missing_likes_count_as_zero(self) -> None:
        assert total_likes([{"author": "a"}, {"author": "b", "likes": None}, {"author": "c", "likes": 3}]) == 3

    def test_accepts_objects(self) -> None:
        blogs = [
            BlogDB(user_id=uuid4(), title="t", author="a", url="u", likes=4),
            SimpleNamespace(author="b", likes=6),
        ]
        assert total_likes(blogs) == 10


class TestMostBlogs:
    def test_empty_list(self) -> None:
        assert most_blogs([]) == {"author": "", "blogs": 0}

    def test_bigger_list(self) -> None:
        assert most_blogs(BLOGS) == {"author": "Robert C. Martin", "blogs": 3}

    def test_first_to_reach_the_maximum_wins_a_tie(self) -> None:
        blogs = [{"author": "a"}, {"author": "b"}, {"author": "b"}, {"author": "a"}]
        assert most_blogs(blogs) == {"author": "b", "blogs": 2}

    def test_does_not_mutate_input(self) -> None:
        blogs = [dict(blog) for blog in BLOGS]
        most_blogs(blogs)
        assert blogs == BLOGS


class TestMostLikes:
    def test_empty_list(self) -> None:
        assert most_likes([]) == {"author": "", "likes": 0}

    def test_bigger_list(self) -> None:
        assert most_likes(BLOGS) == {"author": "Edsger W. Dijkstra", "likes": 17}

    @pytest.mark.parametrize(
        ("blogs", "expected"),
        [
            (
                [{"author": "a", "likes": 3}, {"author": "b", "likes": 3}],
                {"author": "a", "likes": 3},
            ),
            (
                [{"author": "a", "likes": 1}, {"author": "b", "likes": 2}, {"author": "a", "likes": 1}],
                {"author": "b", "likes": 2},
            ),
            (
                [{"author": "a", "likes": 0}, {"author": "b", "likes": 0}],
                {"author": "", "likes": 0},
            ),
        ],
    )
    def test_tie_break(self, blogs: list[dict], expected: dict) -> None:
        assert most_likes(blogs) == expected
