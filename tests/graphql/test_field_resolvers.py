"""
Unit tests for resolver functions called with a mocked info object
"""

from unittest.mock import MagicMock

import pytest
import strawberry

from bookshelf.graphql.resolvers.author import (
    add_author,
    resolve_author_books,
    resolve_author_by_id,
)
from bookshelf.graphql.resolvers.book import (
    add_book,
    resolve_book_author,
    resolve_book_by_id,
)
from bookshelf.graphql.types.author import Author
from bookshelf.graphql.types.book import Book
from bookshelf.store import InMemoryStore


def make_info(context: dict) -> MagicMock:
    info = MagicMock(spec=strawberry.Info)
    info.context = context
    return info


@pytest.fixture
def mock_info(store):
    """Create a mock GraphQL info object carrying the store."""
    return make_info({"store": store, "legacy_add_author": False})


@pytest.fixture
def legacy_info(store):
    return make_info({"store": store, "legacy_add_author": True})


class TestBookResolvers:
    """Tests for book resolvers."""

    def test_resolve_book_by_id_returns_type(self, mock_info):
        book = resolve_book_by_id(mock_info, 3)

        assert isinstance(book, Book)
        assert (book.id, book.name, book.author_id) == (3, "A Game of Thrones", 2)

    def test_resolve_book_by_none(self, mock_info):
        assert resolve_book_by_id(mock_info, None) is None

    def test_resolve_book_author(self, mock_info):
        book = Book(id=100, name="Detached", author_id=1)
        author = resolve_book_author(book, mock_info)

        assert isinstance(author, Author)
        assert author.name == "J.K. Rowling"

    def test_resolve_book_author_dangling(self, mock_info):
        book = Book(id=100, name="Detached", author_id=55)
        assert resolve_book_author(book, mock_info) is None

    def test_add_book_writes_through_to_store(self, mock_info, store):
        book = add_book(mock_info, "Dune", 4)

        assert book.id == 9
        assert store.get_book(9).name == "Dune"


class TestAuthorResolvers:
    """Tests for author resolvers."""

    def test_resolve_author_by_id(self, mock_info):
        author = resolve_author_by_id(mock_info, 2)
        assert author.name == "George R.R. Martin"

    def test_resolve_author_books_uses_parent_id(self, mock_info):
        author = Author(id=3, name="whatever")
        books = resolve_author_books(author, mock_info)

        assert [b.name for b in books] == ["The Hobbit", "The Lord of the Rings"]

    def test_add_author_default(self, mock_info, store):
        author = add_author(mock_info, "Ursula K. Le Guin")

        assert author.id == 5
        assert store.authors[-1].name == "Ursula K. Le Guin"

    def test_add_author_legacy(self, legacy_info, store):
        author = add_author(legacy_info, "Ursula K. Le Guin")

        assert isinstance(author, Author)
        assert author.id == 5
        assert len(store.authors) == 4
        assert store.books[-1].name == "Ursula K. Le Guin"


class TestContext:
    """Tests for context handling."""

    def test_missing_store_raises(self):
        info = make_info({})
        with pytest.raises(RuntimeError, match="no store"):
            resolve_book_by_id(info, 1)

    def test_legacy_flag_defaults_off(self):
        store = InMemoryStore.seeded()
        info = make_info({"store": store})

        add_author(info, "Ursula K. Le Guin")

        assert store.authors[-1].name == "Ursula K. Le Guin"
