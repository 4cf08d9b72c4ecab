"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.author import Author
from ..types.book import Book


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addBook")
    async def add_book(
        self,
        info: strawberry.Info,
        title: str,
        author_id: strawberry.ID,
        published_year: int | None = None,
    ) -> Book:
        """Add a new book. Returns the created book."""
        from ..resolvers.book import create_book

        return await create_book(info, title, published_year, str(author_id))

    @strawberry.mutation(name="addAuthor")
    async def add_author(self, info: strawberry.Info, name: str) -> Author:
        """Add a new author without books."""
        from ..resolvers.author import create_author

        return await create_author(info, name)
