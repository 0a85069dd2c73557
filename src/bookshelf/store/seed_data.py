"""
Sample data loaded into the store at startup.
"""

from __future__ import annotations

from .records import AuthorRecord, BookRecord

SEED_AUTHORS: tuple[tuple[int, str], ...] = (
    (1, "J.K. Rowling"),
    (2, "George R.R. Martin"),
    (3, "J.R.R. Tolkien"),
    (4, "Isaac Asimov"),
)

SEED_BOOKS: tuple[tuple[int, str, int], ...] = (
    (1, "Harry Potter and the Philosopher's Stone", 1),
    (2, "Harry Potter and the Chamber of Secrets", 1),
    (3, "A Game of Thrones", 2),
    (4, "A Clash of Kings", 2),
    (5, "The Hobbit", 3),
    (6, "The Lord of the Rings", 3),
    (7, "Foundation", 4),
    (8, "I, Robot", 4),
)


def seed_authors() -> list[AuthorRecord]:
    """Return fresh copies of the sample authors."""
    return [AuthorRecord(id=author_id, name=name) for author_id, name in SEED_AUTHORS]


def seed_books() -> list[BookRecord]:
    """Return fresh copies of the sample books."""
    return [
        BookRecord(id=book_id, name=name, author_id=author_id)
        for book_id, name, author_id in SEED_BOOKS
    ]
