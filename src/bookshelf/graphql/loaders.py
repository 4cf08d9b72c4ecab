from typing import TYPE_CHECKING

from strawberry.dataloader import DataLoader

from ..store import AuthorRecord

if TYPE_CHECKING:
    from ..store import BookStore


class Loaders:
    def __init__(self, store: "BookStore"):
        self.store = store
        self.author_loader = DataLoader(load_fn=self.load_authors)

    async def load_authors(self, keys: list[str]) -> list[AuthorRecord | None]:
        """Batch load authors by ID."""
        return self.store.find_authors_by_ids(keys)
