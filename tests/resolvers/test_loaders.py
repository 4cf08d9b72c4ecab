"""
Tests for the per-request author loader
"""

import pytest

from bookshelf.graphql.loaders import Loaders


@pytest.mark.asyncio
async def test_author_loader_batches_and_keeps_positions(store):
    loaders = Loaders(store)

    authors = await loaders.author_loader.load_many(["2", "missing", "1"])

    assert [a.name if a else None for a in authors] == ["Akshay Saini", None, "Chirag Goel"]


@pytest.mark.asyncio
async def test_loaders_are_independent_per_instance(store):
    first = Loaders(store)
    await first.author_loader.load("1")
    store.create_author("Late Arrival")

    assert (await Loaders(store).author_loader.load("3")).name == "Late Arrival"
