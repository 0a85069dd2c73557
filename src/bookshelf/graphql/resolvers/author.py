from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info, is_legacy_add_author
from ..converters import record_to_author, record_to_book

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


# Query resolvers
def resolve_author_by_id(info: strawberry.Info, id: int | None) -> Author | None:
    """Resolve a single author by exact id; an omitted id matches nothing."""
    store = get_store_from_info(info)
    record = store.get_author(id)
    if record is None:
        logger.debug("Author not found", author_id=id)
        return None
    return record_to_author(record)


def resolve_authors(info: strawberry.Info) -> list[Author]:
    """Resolve every author in insertion order."""
    store = get_store_from_info(info)
    return [record_to_author(record) for record in store.authors]


# Field resolvers
def resolve_author_books(author: Author, info: strawberry.Info) -> list[Book]:
    """Resolve Author.books, keeping the book sequence order."""
    store = get_store_from_info(info)
    return [record_to_book(record) for record in store.books_by_author(author.id)]


# Mutation resolvers
def add_author(info: strawberry.Info, name: str) -> Author:
    """
    Append a new author and return it.

    With legacy_add_author enabled in the context the author is appended to
    the book sequence instead, as the first version of this API did.
    """
    store = get_store_from_info(info)
    if is_legacy_add_author(info):
        return record_to_author(store.misfile_author(name))
    return record_to_author(store.add_author(name))
