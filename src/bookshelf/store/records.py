"""Plain records held by the in-memory store."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AuthorRecord:
    """An author row. The author's books are derived from BookRecord.author_id."""

    id: int
    name: str


@dataclass
class BookRecord:
    """A book row.

    ``author_id`` is a soft reference to ``AuthorRecord.id``; nothing checks
    that the author exists. It is ``None`` only for author rows misfiled into
    the book sequence by the legacy addAuthor behaviour.
    """

    id: int
    name: str
    author_id: int | None
