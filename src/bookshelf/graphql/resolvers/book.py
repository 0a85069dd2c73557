from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info
from ..converters import record_to_author, record_to_book

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


# Query resolvers
def resolve_book_by_id(info: strawberry.Info, id: int | None) -> Book | None:
    """
    Resolve a single book by exact id.

    An omitted id matches nothing; it never falls back to the first book.
    """
    store = get_store_from_info(info)
    record = store.get_book(id)
    if record is None:
        logger.debug("Book not found", book_id=id)
        return None
    return record_to_book(record)


def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve every book in insertion order."""
    store = get_store_from_info(info)
    return [record_to_book(record) for record in store.books]


# Field resolvers
def resolve_book_author(book: Book, info: strawberry.Info) -> Author | None:
    """Resolve Book.author by looking up the book's authorId."""
    store = get_store_from_info(info)
    record = store.get_author(book.author_id)
    if record is None:
        return None
    return record_to_author(record)


# Mutation resolvers
def add_book(info: strawberry.Info, name: str, author_id: int) -> Book:
    """
    Append a new book and return it.

    The author id is not checked against the author sequence; a dangling
    reference simply resolves Book.author to null.
    """
    store = get_store_from_info(info)
    record = store.add_book(name, author_id)
    return record_to_book(record)
