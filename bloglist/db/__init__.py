"""Database access."""

from bloglist.db.database import Database

__all__ = ["Database"]
