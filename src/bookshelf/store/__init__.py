"""
In-memory data store for authors and books
"""

from .memory import InMemoryStore
from .records import AuthorRecord, BookRecord

__all__ = ["AuthorRecord", "BookRecord", "InMemoryStore"]
