"""
Process-local store owning the author and book sequences.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from ..logging import get_logger
from .records import AuthorRecord, BookRecord
from .seed_data import seed_authors, seed_books

logger = get_logger(__name__)


def _next_id(records: Iterable[AuthorRecord | BookRecord]) -> int:
    return max((record.id for record in records), default=0) + 1


class InMemoryStore:
    """
    Two ordered, append-only sequences plus the counters that number them.

    The lists are exposed by reference: whoever holds the store sees every
    append immediately. Records are never updated or removed, so insertion
    order is the only ordering.

    Ids come from per-sequence counters rather than from ``len() + 1``. A
    counter starts one past the highest id it was built with and only ever
    grows, so ids stay unique even for stores built from sparse data.
    Reading a counter and appending the new record happen under one lock.
    The legacy ``misfile_author`` path is the one exception; see its docstring.
    """

    def __init__(
        self,
        authors: Iterable[AuthorRecord] | None = None,
        books: Iterable[BookRecord] | None = None,
    ):
        self.authors: list[AuthorRecord] = list(authors or [])
        self.books: list[BookRecord] = list(books or [])
        self._next_author_id = _next_id(self.authors)
        self._next_book_id = _next_id(self.books)
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls) -> InMemoryStore:
        """Build a store preloaded with the sample authors and books."""
        return cls(authors=seed_authors(), books=seed_books())

    # Lookups

    def get_author(self, author_id: int | None) -> AuthorRecord | None:
        """First author with exactly this id, in sequence order."""
        if author_id is None:
            return None
        return next((a for a in self.authors if a.id == author_id), None)

    def get_book(self, book_id: int | None) -> BookRecord | None:
        """First book with exactly this id, in sequence order."""
        if book_id is None:
            return None
        return next((b for b in self.books if b.id == book_id), None)

    def books_by_author(self, author_id: int) -> list[BookRecord]:
        """All books referencing ``author_id``, in book sequence order."""
        return [b for b in self.books if b.author_id == author_id]

    # Appends

    def add_book(self, name: str, author_id: int) -> BookRecord:
        """Append a new book. ``author_id`` is stored as given."""
        with self._lock:
            book = BookRecord(id=self._next_book_id, name=name, author_id=author_id)
            self._next_book_id += 1
            self.books.append(book)

        logger.info("Book added", book_id=book.id, author_id=author_id)
        return book

    def add_author(self, name: str) -> AuthorRecord:
        """Append a new author."""
        with self._lock:
            author = AuthorRecord(id=self._next_author_id, name=name)
            self._next_author_id += 1
            self.authors.append(author)

        logger.info("Author added", author_id=author.id)
        return author

    def misfile_author(self, name: str) -> BookRecord:
        """
        Legacy addAuthor behaviour: append the new author to the book sequence.

        Ids follow the first release exactly: the row gets ``len(authors) + 1``
        (the author list never grows, so repeated calls reuse the same id) and
        the book counter moves up to ``len(books) + 1`` so the next addBook
        numbers from the lengthened book list.

        The row has no ``author_id``, so it never shows up in ``authors`` or
        in any ``Author.books``, and reading ``authorId`` through the Book
        type fails the non-null check.
        """
        with self._lock:
            row = BookRecord(id=len(self.authors) + 1, name=name, author_id=None)
            self.books.append(row)
            self._next_book_id = max(self._next_book_id, len(self.books) + 1)

        logger.warning(
            "Author appended to the book sequence (legacy addAuthor)",
            author_id=row.id,
            book_count=len(self.books),
        )
        return row

    def __repr__(self) -> str:
        return f"InMemoryStore(authors={len(self.authors)}, books={len(self.books)})"
