"""
Endpoint tests for the tool routes, with the use case wired to fake transports.
"""

import pytest
from fastapi.testclient import TestClient

from discussion_tools.interface.app import create_app
from discussion_tools.interface.dependencies import get_use_case
from discussion_tools.services.discussions import DiscussionsUseCase
from fakes import (
    FakeQueryExecutor,
    FakeResourceFetcher,
    categories_page,
    discussion_node,
    discussions_page,
)


@pytest.fixture
def executor(category_one, category_two):
    return FakeQueryExecutor({
        "categories": lambda v: categories_page([
            (category_one.id, category_one.name),
            (category_two.id, category_two.name),
        ]),
        "discussions": lambda v: discussions_page([
            discussion_node(1, "2023-01-01T00:00:00Z", category_one),
            discussion_node(2, "2023-02-01T00:00:00Z", category_one),
        ]),
        "discussion": lambda v: {"repository": {"discussion": None}},
    })


@pytest.fixture
def fetcher(three_discussions):
    return FakeResourceFetcher(three_discussions)


@pytest.fixture
def client(executor, fetcher):
    app = create_app()
    app.dependency_overrides[get_use_case] = lambda: DiscussionsUseCase(executor, fetcher)
    return TestClient(app)


class TestToolRoutes:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok", "tools": 4}

    def test_tool_catalogue(self, client):
        tools = client.get("/tools").json()
        assert [t["name"] for t in tools] == [
            "list_discussions",
            "get_discussion",
            "get_discussion_comments",
            "list_discussion_categories",
        ]
        assert all(t["readOnly"] for t in tools)

    def test_list_discussions_by_category(self, client, executor):
        resp = client.post(
            "/tools/list_discussions",
            json={"owner": "owner", "repo": "repo", "category": "CategoryOne"},
        )

        assert resp.status_code == 200
        body = resp.json()
        assert [d["number"] for d in body] == [1, 2]
        assert body[0]["createdAt"].startswith("2023-01-01T00:00:00")
        assert body[0]["category"] == {"id": "123", "name": "CategoryOne"}
        assert executor.calls[-1][1]["categoryId"] == "123"

    def test_list_discussions_with_offset_filters(self, client, fetcher):
        resp = client.post(
            "/tools/list_discussions",
            json={"owner": "owner", "repo": "repo", "state": "closed", "perPage": 10},
        )

        assert resp.status_code == 200
        assert [d["number"] for d in resp.json()] == [2]
        assert resp.json()[0]["labels"] == ["feature"]

    def test_first_and_last_is_a_tool_error(self, client, executor, fetcher):
        resp = client.post(
            "/tools/list_discussions",
            json={"owner": "owner", "repo": "repo", "first": 10, "last": 5},
        )

        assert resp.status_code == 422
        assert resp.json() == {
            "status": "error",
            "message": "only one of 'first' or 'last' may be specified",
        }
        assert executor.calls == []
        assert fetcher.calls == []

    def test_unknown_category_is_not_found(self, client):
        resp = client.post(
            "/tools/list_discussions",
            json={"owner": "owner", "repo": "repo", "category": "Elsewhere"},
        )

        assert resp.status_code == 404
        assert "Elsewhere" in resp.json()["message"]

    def test_missing_owner_is_a_validation_error(self, client):
        resp = client.post("/tools/list_discussions", json={"repo": "repo"})

        assert resp.status_code == 422
        assert resp.json()["status"] == "error"
        assert "owner" in resp.json()["message"]

    def test_invalid_state_is_a_validation_error(self, client):
        resp = client.post(
            "/tools/list_discussions",
            json={"owner": "owner", "repo": "repo", "state": "pending"},
        )

        assert resp.status_code == 422

    def test_get_missing_discussion(self, client):
        resp = client.post(
            "/tools/get_discussion",
            json={"owner": "owner", "repo": "repo", "discussionNumber": 99},
        )

        assert resp.status_code == 404
        assert "#99" in resp.json()["message"]

    def test_list_categories(self, client):
        resp = client.post(
            "/tools/list_discussion_categories",
            json={"owner": "owner", "repo": "repo", "first": 2},
        )

        assert resp.status_code == 200
        assert resp.json() == [
            {"id": "123", "name": "CategoryOne"},
            {"id": "456", "name": "CategoryTwo"},
        ]

    def test_since_alone_lists_through_the_fetcher(self, client, executor, fetcher):
        resp = client.post(
            "/tools/list_discussions",
            json={"owner": "owner", "repo": "repo", "since": "2023-01-15"},
        )

        assert resp.status_code == 200
        assert [d["number"] for d in resp.json()] == [2, 3]
        assert executor.calls == []

    def test_error_envelope_is_documented(self, client):
        schema = client.get("/openapi.json").json()
        responses = schema["paths"]["/tools/list_discussions"]["post"]["responses"]

        assert responses["404"]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/ErrorResponse"
        }
        assert "ErrorResponse" in schema["components"]["schemas"]
        assert "`get_discussion_comments`" in schema["info"]["description"]
