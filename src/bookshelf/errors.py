"""
Exceptions raised by the Bookshelf resolution layer
"""


class BookshelfError(Exception):
    """Base exception for Bookshelf operations."""

    pass


class AuthorNotFound(BookshelfError):
    """Raised when a write references an author that does not exist."""

    def __init__(self, author_id: str):
        self.author_id = author_id
        super().__init__(f"Author not found: {author_id}")


class InvalidArgument(BookshelfError):
    """Raised when a field argument passes schema validation but is unusable."""

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")
