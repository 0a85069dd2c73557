"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Callable, Generator
from typing import Any

import pytest
from strawberry.types import ExecutionResult

from bookshelf.graphql.context import build_context
from bookshelf.graphql.schema import schema
from bookshelf.store import InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    """A fresh store preloaded with the sample authors and books."""
    return InMemoryStore.seeded()


@pytest.fixture
def execute(store: InMemoryStore) -> Callable[..., ExecutionResult]:
    """Run a GraphQL document synchronously against the ``store`` fixture."""

    def _execute(
        query: str,
        variables: dict[str, Any] | None = None,
        *,
        legacy_add_author: bool = False,
        target: InMemoryStore | None = None,
    ) -> ExecutionResult:
        context = build_context(
            target if target is not None else store, legacy_add_author=legacy_add_author
        )
        return schema.execute_sync(query, variable_values=variables, context_value=context)

    return _execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
