"""
Process-local store of authors and books
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import replace

from ..logging import get_logger
from .models import AuthorRecord, BookRecord
from .seed_data import BOOK_ID_OFFSET, seed_sample_data

logger = get_logger(__name__)


def _copy_author(author: AuthorRecord) -> AuthorRecord:
    return replace(author, book_ids=list(author.book_ids))


def _next_numeric_id(ids: Iterable[str], floor: int) -> int:
    """Return the first integer id above every numeric id in ``ids`` and >= ``floor``."""
    numeric = [int(i) for i in ids if i.isdigit()]
    return max([floor, *(n + 1 for n in numeric)])


class BookStore:
    """
    Owns the author and book collections and generates their identifiers.

    Every public method takes the store lock, so a single store can be shared
    by concurrent requests. Readers receive copies of the stored records and
    never observe a half-applied write.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._authors: dict[str, AuthorRecord] = {}
        self._books: dict[str, BookRecord] = {}
        self._next_author_id = 1
        self._next_book_id = BOOK_ID_OFFSET

    @classmethod
    def with_sample_data(cls) -> BookStore:
        """Create a store pre-loaded with the sample authors and books."""
        store = cls()
        seed_sample_data(store)
        return store

    def load(self, authors: Iterable[AuthorRecord], books: Iterable[BookRecord]) -> None:
        """Bulk-load existing rows, keeping their ids, and advance the id counters."""
        with self._lock:
            for author in authors:
                self._authors[author.id] = author
            for book in books:
                self._books[book.id] = book

            self._next_author_id = _next_numeric_id(self._authors, self._next_author_id)
            self._next_book_id = _next_numeric_id(
                self._books, len(self._books) + BOOK_ID_OFFSET
            )

    # Reads

    def list_authors(self) -> list[AuthorRecord]:
        with self._lock:
            return [_copy_author(a) for a in self._authors.values()]

    def list_books(self) -> list[BookRecord]:
        with self._lock:
            return [replace(b) for b in self._books.values()]

    def find_author_by_id(self, author_id: str) -> AuthorRecord | None:
        with self._lock:
            author = self._authors.get(author_id)
            return _copy_author(author) if author is not None else None

    def find_authors_by_ids(self, author_ids: Iterable[str]) -> list[AuthorRecord | None]:
        """Positional lookup: one entry per requested id, ``None`` for misses."""
        with self._lock:
            return [
                _copy_author(self._authors[i]) if i in self._authors else None
                for i in author_ids
            ]

    def find_books_by_ids(self, book_ids: Iterable[str]) -> list[BookRecord]:
        """Return books whose id is in ``book_ids``, in store order.

        Unknown ids are ignored and repeated ids do not repeat books.
        """
        wanted = set(book_ids)
        with self._lock:
            return [replace(b) for b in self._books.values() if b.id in wanted]

    # Writes

    def create_book(
        self, title: str, published_year: int | None, author_id: str
    ) -> BookRecord:
        """
        Append a new book and link it to its author when the author exists.

        The book is stored even when ``author_id`` matches no author; in that
        case no author's ``book_ids`` changes.
        """
        with self._lock:
            book = BookRecord(
                id=str(self._next_book_id),
                title=title,
                published_year=published_year,
                author_id=author_id,
            )
            self._next_book_id += 1
            self._books[book.id] = book

            author = self._authors.get(author_id)
            if author is not None:
                author.book_ids.append(book.id)
            else:
                logger.debug(
                    "Book stored without author link", book_id=book.id, author_id=author_id
                )

            return replace(book)

    def create_author(self, name: str) -> AuthorRecord:
        """Append a new author with no books."""
        with self._lock:
            author = AuthorRecord(id=str(self._next_author_id), name=name)
            self._next_author_id += 1
            self._authors[author.id] = author
            return _copy_author(author)
