from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import AuthorNotFound, InvalidArgument
from ...logging import get_logger
from ..context import get_loaders_from_info, get_store_from_info

if TYPE_CHECKING:
    from ...store import BookRecord
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


def to_book_type(book: BookRecord) -> Book:
    """Convert a stored book into the GraphQL type."""
    from ..types.book import Book as BookType

    return BookType(
        id=strawberry.ID(book.id),
        title=book.title,
        published_year=book.published_year,
        author_id=book.author_id,
    )


# Query resolvers
async def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve every book in creation order."""
    store = get_store_from_info(info)
    return [to_book_type(b) for b in store.list_books()]


# Field resolvers
async def resolve_book_author(book: Book, info: strawberry.Info) -> Author | None:
    """
    Resolve the author of a book.

    A dangling ``author_id`` is not an error: the field resolves to null.
    """
    from .author import to_author_type

    loaders = get_loaders_from_info(info)
    author = await loaders.author_loader.load(book.author_id)

    if author is None:
        logger.debug("Book author not found", book_id=str(book.id), author_id=book.author_id)
        return None

    return to_author_type(author)


# Mutation resolvers
async def create_book(
    info: strawberry.Info,
    title: str,
    published_year: int | None,
    author_id: str,
) -> Book:
    """
    Create a new book and link it to its author.

    An unknown ``author_id`` still creates the book, unlinked, unless the
    context asks for strict author references.
    """
    if not title.strip():
        logger.warning("Rejected addBook with blank title", author_id=author_id)
        raise InvalidArgument("title", "must not be blank")
    if not author_id.strip():
        logger.warning("Rejected addBook with blank authorId")
        raise InvalidArgument("authorId", "must not be blank")

    store = get_store_from_info(info)

    if info.context.get("strict_author_references") and store.find_author_by_id(author_id) is None:
        logger.warning("Rejected addBook for unknown author", author_id=author_id)
        raise AuthorNotFound(author_id)

    book = store.create_book(title, published_year, author_id)
    # The author row changed; drop any copy cached earlier in this request
    get_loaders_from_info(info).author_loader.clear(author_id)

    logger.info(
        "Book created",
        book_id=book.id,
        title=book.title,
        published_year=book.published_year,
        author_id=book.author_id,
    )
    return to_book_type(book)
