"""
Per-request GraphQL context
"""

from typing import TYPE_CHECKING, Any

import strawberry

from ..config import settings
from ..logging import get_logger
from .loaders import Loaders

if TYPE_CHECKING:
    from ..store import BookStore

logger = get_logger(__name__)


def build_context(
    store: "BookStore",
    request: Any = None,
    strict_author_references: bool | None = None,
) -> dict[str, Any]:
    """
    Build the context dict handed to every resolver of one GraphQL operation.

    Loaders are created per call so that batched lookups never serve results
    cached by another request.
    """
    if strict_author_references is None:
        strict_author_references = settings.strict_author_references

    return {
        "request": request,
        "store": store,
        "loaders": Loaders(store),
        "strict_author_references": strict_author_references,
    }


def get_store_from_info(info: strawberry.Info) -> "BookStore":
    """
    Extract the store from the GraphQL info object.

    Raises:
        RuntimeError: If the context was built without a store
    """
    store = info.context.get("store")
    if store is None:
        logger.error("Store not found in GraphQL context")
        raise RuntimeError("Store not found in GraphQL context")
    return store


def get_loaders_from_info(info: strawberry.Info) -> Loaders:
    """Return the request's loaders, creating them on first use if absent."""
    loaders = info.context.get("loaders")
    if loaders is None:
        loaders = Loaders(get_store_from_info(info))
        info.context["loaders"] = loaders
    return loaders
