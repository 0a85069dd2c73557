"""
Root GraphQL query definitions
"""

import strawberry

from ..types.author import Author
from ..types.book import Book


@strawberry.type(description="Root Query")
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="A Single Book")
    def book(self, info: strawberry.Info, id: int | None = None) -> Book | None:
        from ..resolvers.book import resolve_book_by_id

        return resolve_book_by_id(info, id)

    @strawberry.field(description="List of All Books")
    def books(self, info: strawberry.Info) -> list[Book | None] | None:
        from ..resolvers.book import resolve_books

        return resolve_books(info)

    @strawberry.field(description="A Single Author")
    def author(self, info: strawberry.Info, id: int | None = None) -> Author | None:
        from ..resolvers.author import resolve_author_by_id

        return resolve_author_by_id(info, id)

    @strawberry.field(description="List of All Authors")
    def authors(self, info: strawberry.Info) -> list[Author | None] | None:
        from ..resolvers.author import resolve_authors

        return resolve_authors(info)
