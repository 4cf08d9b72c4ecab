"""
Tests for the FastAPI application and the mounted GraphQL endpoint
"""

from fastapi.testclient import TestClient

from bookshelf import __version__
from bookshelf.api.app import create_app
from bookshelf.store import BookStore


def test_health_check(store):
    with TestClient(create_app(store)) as client:
        resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "version": __version__}


def test_graphql_query_over_http(store):
    with TestClient(create_app(store)) as client:
        resp = client.post("/graphql", json={"query": "{ authors { name books { title } } }"})

    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["authors"][1] == {"name": "Akshay Saini", "books": [{"title": "Book 3"}]}


def test_graphql_mutation_over_http_updates_app_store(store):
    payload = {
        "query": (
            "mutation AddBook($title: String!, $authorId: ID!) "
            "{ addBook(title: $title, authorId: $authorId) { id title author { name } } }"
        ),
        "operationName": "AddBook",
        "variables": {"title": "New Book", "authorId": "2"},
    }

    with TestClient(create_app(store)) as client:
        resp = client.post("/graphql", json=payload)

    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["addBook"] == {
        "id": "104",
        "title": "New Book",
        "author": {"name": "Akshay Saini"},
    }
    assert store.find_author_by_id("2").book_ids == ["103", "104"]


def test_applications_do_not_share_state():
    first = TestClient(create_app(BookStore.with_sample_data()))
    second = TestClient(create_app(BookStore.with_sample_data()))
    mutation = {"query": 'mutation { addBook(title: "Only here", authorId: "1") { id } }'}
    query = {"query": "{ books { id } }"}

    first.post("/graphql", json=mutation)

    assert len(first.post("/graphql", json=query).json()["data"]["books"]) == 4
    assert len(second.post("/graphql", json=query).json()["data"]["books"]) == 3


def test_create_app_with_empty_store():
    with TestClient(create_app(BookStore())) as client:
        resp = client.post("/graphql", json={"query": "{ authors { id } books { id } }"})

    assert resp.json()["data"] == {"authors": [], "books": []}
