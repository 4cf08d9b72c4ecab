"""
Sample rows loaded into a fresh store.

The first created book receives id ``len(SAMPLE_BOOKS) + BOOK_ID_OFFSET``,
which keeps the numbering readable ("101", "102", ... "104").
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..logging import get_logger
from .models import AuthorRecord, BookRecord

if TYPE_CHECKING:
    from .memory import BookStore

logger = get_logger(__name__)

BOOK_ID_OFFSET = 101

SAMPLE_AUTHORS: tuple[AuthorRecord, ...] = (
    AuthorRecord(id="1", name="Chirag Goel", book_ids=["101", "102"]),
    AuthorRecord(id="2", name="Akshay Saini", book_ids=["103"]),
)

SAMPLE_BOOKS: tuple[BookRecord, ...] = (
    BookRecord(
        id="101",
        title="Namaste Frontend System Design",
        published_year=2000,
        author_id="1",
    ),
    BookRecord(id="102", title="Book 2", published_year=2010, author_id="1"),
    BookRecord(id="103", title="Book 3", published_year=2020, author_id="2"),
)


def seed_sample_data(store: BookStore) -> None:
    """
    Load the sample authors and books into ``store``.

    Records are copied so that every store owns its own rows and mutations
    on one store never leak into another.

    Args:
        store: Store to seed. Expected to be empty.
    """
    store.load(
        authors=[
            AuthorRecord(id=a.id, name=a.name, book_ids=list(a.book_ids)) for a in SAMPLE_AUTHORS
        ],
        books=[
            BookRecord(
                id=b.id,
                title=b.title,
                published_year=b.published_year,
                author_id=b.author_id,
            )
            for b in SAMPLE_BOOKS
        ],
    )
    logger.info(
        "Seeded sample data",
        authors=len(SAMPLE_AUTHORS),
        books=len(SAMPLE_BOOKS),
    )
