"""
In-memory store for Bookshelf
"""

from .memory import BookStore
from .models import AuthorRecord, BookRecord

__all__ = ["AuthorRecord", "BookRecord", "BookStore"]
