"""
Converters between store records and GraphQL types.
"""

from __future__ import annotations

from ..store import AuthorRecord, BookRecord
from .types.author import Author
from .types.book import Book


def record_to_book(record: BookRecord) -> Book:
    """Convert a book row to the GraphQL Book type."""
    # author_id is None only for misfiled author rows; graphql-core reports
    # that as a non-null violation on Book.authorId
    return Book(id=record.id, name=record.name, author_id=record.author_id)  # type: ignore[arg-type]


def record_to_author(record: AuthorRecord | BookRecord) -> Author:
    """Convert an author row (or a misfiled one) to the GraphQL Author type."""
    return Author(id=record.id, name=record.name)
