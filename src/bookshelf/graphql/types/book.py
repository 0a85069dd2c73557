"""
Book GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .author import Author


@strawberry.type(description="This is a book written by an Author")
class Book:
    """Book type for GraphQL API."""

    id: int
    name: str
    author_id: int

    @strawberry.field
    def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:
        """The author this book points at, if one exists."""
        from ..resolvers.book import resolve_book_author

        return resolve_book_author(self, info)
