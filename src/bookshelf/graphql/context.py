"""
Access to per-request GraphQL context values
"""

from typing import Any

import strawberry

from ..logging import get_logger
from ..store import InMemoryStore

logger = get_logger(__name__)


def build_context(
    store: InMemoryStore, legacy_add_author: bool = False, **extra: Any
) -> dict[str, Any]:
    """Build the context dict handed to every resolver."""
    return {
        "store": store,
        "legacy_add_author": legacy_add_author,
        **extra,
    }


def get_store_from_info(info: strawberry.Info) -> InMemoryStore:
    """
    Extract the store from the GraphQL info object.

    Raises:
        RuntimeError: If the context was built without a store
    """
    store = info.context.get("store")
    if store is None:
        logger.error("Store not found in GraphQL context")
        raise RuntimeError("GraphQL context has no store")
    return store


def is_legacy_add_author(info: strawberry.Info) -> bool:
    """Whether addAuthor should reproduce the historical misfiling."""
    return bool(info.context.get("legacy_add_author", False))
