"""
Record types held by the in-memory store
"""

from dataclasses import dataclass, field


@dataclass
class AuthorRecord:
    """Stored author row."""

    id: str
    name: str
    book_ids: list[str] = field(default_factory=list)


@dataclass
class BookRecord:
    """Stored book row.

    ``author_id`` may reference an author that does not exist; the reverse
    link on the author is only written when the author is found.
    """

    id: str
    title: str
    published_year: int | None
    author_id: str
