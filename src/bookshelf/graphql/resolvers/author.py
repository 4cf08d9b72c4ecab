from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import InvalidArgument
from ...logging import get_logger
from ..context import get_loaders_from_info, get_store_from_info
from .book import to_book_type

if TYPE_CHECKING:
    from ...store import AuthorRecord
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


def to_author_type(author: AuthorRecord) -> Author:
    """Convert a stored author into the GraphQL type."""
    from ..types.author import Author as AuthorType

    return AuthorType(
        id=strawberry.ID(author.id),
        name=author.name,
        book_ids=list(author.book_ids),
    )


# Query resolvers
async def resolve_authors(info: strawberry.Info) -> list[Author]:
    """Resolve every author in insertion order."""
    store = get_store_from_info(info)
    return [to_author_type(a) for a in store.list_authors()]


# Field resolvers
async def resolve_author_books(author: Author, info: strawberry.Info) -> list[Book]:
    """
    Resolve the books of an author.

    Ids in ``book_ids`` that match no stored book are skipped; the result
    follows store order, not the order of ``book_ids``.
    """
    if not author.book_ids:
        return []

    store = get_store_from_info(info)
    books = store.find_books_by_ids(author.book_ids)

    if len(books) < len(set(author.book_ids)):
        logger.debug(
            "Author references missing books",
            author_id=str(author.id),
            requested=len(set(author.book_ids)),
            found=len(books),
        )

    return [to_book_type(b) for b in books]


# Mutation resolvers
async def create_author(info: strawberry.Info, name: str) -> Author:
    """Create a new author with no books."""
    if not name.strip():
        logger.warning("Rejected addAuthor with blank name")
        raise InvalidArgument("name", "must not be blank")

    store = get_store_from_info(info)
    author = store.create_author(name)
    get_loaders_from_info(info).author_loader.clear(author.id)

    logger.info("Author created", author_id=author.id, name=author.name)
    return to_author_type(author)
