"""
Author GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .book import Book


@strawberry.type(description="This represents an author of a Book")
class Author:
    """Author type for GraphQL API."""

    id: int
    name: str

    @strawberry.field
    def books(
        self, info: strawberry.Info
    ) -> list[Annotated["Book", strawberry.lazy(".book")] | None] | None:
        """Books whose authorId matches this author, in book order."""
        from ..resolvers.author import resolve_author_books

        return resolve_author_books(self, info)
