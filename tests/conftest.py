"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

# Add src directory to path so imports work without an install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bookshelf.graphql.context import build_context
from bookshelf.store import BookStore


@pytest.fixture
def store() -> BookStore:
    """A fresh store holding the sample authors and books."""
    return BookStore.with_sample_data()


@pytest.fixture
def empty_store() -> BookStore:
    return BookStore()


@pytest.fixture
def context(store: BookStore) -> dict[str, Any]:
    """GraphQL context bound to the ``store`` fixture."""
    return build_context(store, strict_author_references=False)


@pytest.fixture
def mock_info(context: dict[str, Any]) -> MagicMock:
    """Create a mock GraphQL info object carrying a real context dict."""
    info = MagicMock(spec=strawberry.Info)
    info.context = context
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
