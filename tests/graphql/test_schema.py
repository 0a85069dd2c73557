"""
Tests for the schema surface and startup validation
"""

from unittest.mock import patch

import pytest
from graphql import GraphQLError

from bookshelf.graphql import schema as schema_module
from bookshelf.graphql.schema import SchemaValidationError, print_schema, validate_schema


@pytest.fixture(scope="module")
def sdl() -> str:
    return print_schema()


class TestSchemaSurface:
    """The printed SDL exposes the documented fields and types."""

    @pytest.mark.parametrize(
        "fragment",
        [
            "book(id: Int",
            "): Book",
            "books: [Book]",
            "author(id: Int",
            "authors: [Author]",
            "addBook(name: String!, authorId: Int!): Book",
            "addAuthor(name: String!): Author",
            "authorId: Int!",
            "author: Author",
        ],
    )
    def test_fragment_present(self, sdl, fragment):
        assert fragment in sdl

    def test_object_types(self, sdl):
        for type_name in ("type Query", "type Mutation", "type Book", "type Author"):
            assert type_name in sdl

    @pytest.mark.parametrize(
        "description",
        [
            "This is a book written by an Author",
            "This represents an author of a Book",
            "A Single Book",
            "List of All Books",
            "A Single Author",
            "List of All Authors",
            "Add a new Book",
            "Add an author",
        ],
    )
    def test_descriptions(self, sdl, description):
        assert description in sdl

    def test_no_input_types(self, sdl):
        assert "input " not in sdl


class TestValidateSchema:
    """Startup validation."""

    def test_valid_schema_passes(self):
        validate_schema()

    def test_structural_errors_fail_fast(self):
        with patch.object(
            schema_module, "gql_validate_schema", return_value=[GraphQLError("broken type")]
        ):
            with pytest.raises(SchemaValidationError, match="broken type"):
                validate_schema()
