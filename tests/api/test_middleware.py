"""
Unit tests for request logging middleware helpers
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from bookshelf.middleware import extract_graphql_operation_name, operation_name_from_document


def make_request(method: str, path: str = "/graphql", query_params=None, body: bytes = b""):
    request = MagicMock()
    request.method = method
    request.url.path = path
    request.query_params = query_params or {}
    request.body = AsyncMock(return_value=body)
    return request


@pytest.mark.parametrize(
    ("document", "expected"),
    [
        ("query Books { books { id } }", "Books"),
        ('mutation AddBook { addBook(title: "t", authorId: "1") { id } }', "mutation:AddBook"),
        ("{ books { id } }", "unnamed_operation"),
        ("query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
        ("", None),
        (None, None),
    ],
)
def test_operation_name_from_document(document, expected):
    assert operation_name_from_document(document) == expected


@pytest.mark.asyncio
async def test_post_prefers_operation_name():
    body = json.dumps({"query": "query A { books { id } }", "operationName": "B"}).encode()

    assert await extract_graphql_operation_name(make_request("POST", body=body)) == "B"


@pytest.mark.asyncio
async def test_post_falls_back_to_document():
    body = json.dumps({"query": "mutation AddAuthor { addAuthor(name: \"n\") { id } }"}).encode()

    assert await extract_graphql_operation_name(make_request("POST", body=body)) == (
        "mutation:AddAuthor"
    )


@pytest.mark.asyncio
async def test_post_with_invalid_json():
    assert await extract_graphql_operation_name(make_request("POST", body=b"{not json")) is None


@pytest.mark.asyncio
async def test_get_reads_query_params():
    request = make_request("GET", query_params={"query": "query Authors { authors { id } }"})

    assert await extract_graphql_operation_name(request) == "Authors"


@pytest.mark.asyncio
async def test_other_paths_are_ignored():
    assert await extract_graphql_operation_name(make_request("GET", path="/health")) is None
