"""End-to-end tests for the article and health endpoints."""

import pytest
from fastapi.testclient import TestClient

from talkback.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    return TestClient(create_app(container=build_test_container()))


class TestGetArticle:
    """GET /articles"""

    def test_unknown_article_is_204(self, client):
        response = client.get("/articles", params={"article_id": "nothing-yet"})

        assert response.status_code == 204
        assert response.content == b""

    def test_missing_article_id_is_400(self, client):
        assert client.get("/articles").status_code == 400

    def test_get_by_path(self, client):
        client.post("/articles/like", json={"article_id": "p-1", "user_id": "u"})

        response = client.get("/articles/p-1")

        assert response.status_code == 200
        assert response.json()["likes"] == ["u"]


class TestArticleLikes:
    """POST /articles/like and /articles/unlike"""

    def test_first_like_creates_article(self, client):
        # Act
        response = client.post(
            "/articles/like", json={"article_id": "a-1", "user_id": "alice"}
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "article_id": "a-1",
            "likes": ["alice"],
            "likes_count": 1,
            "comments_count": 0,
            "replies_count": 0,
        }

    def test_duplicate_like_is_409(self, client):
        payload = {"article_id": "a-1", "user_id": "alice"}
        client.post("/articles/like", json=payload)

        response = client.post("/articles/like", json=payload)

        assert response.status_code == 409
        assert client.get("/articles/a-1").json()["likes_count"] == 1

    def test_unlike_unknown_article_is_404(self, client):
        response = client.post(
            "/articles/unlike", json={"article_id": "a-9", "user_id": "alice"}
        )

        assert response.status_code == 404

    def test_unlike_without_like_is_409(self, client):
        client.post("/articles/like", json={"article_id": "a-1", "user_id": "alice"})

        response = client.post(
            "/articles/unlike", json={"article_id": "a-1", "user_id": "bob"}
        )

        assert response.status_code == 409

    def test_missing_user_is_400(self, client):
        response = client.post("/articles/like", json={"article_id": "a-1"})

        assert response.status_code == 400
        assert "user_id" in response.json()["detail"]


class TestReconcile:
    """POST /articles/reconcile"""

    def test_reconcile_unknown_article_is_404(self, client):
        response = client.post("/articles/reconcile", json={"article_id": "ghost"})

        assert response.status_code == 404

    def test_reconcile_consistent_article(self, client):
        client.post(
            "/comments",
            json={
                "article_id": "r-1",
                "comment_body": "hi",
                "author": {"id": "u", "name": "U"},
            },
        )

        response = client.post("/articles/reconcile", json={"article_id": "r-1"})

        assert response.status_code == 200
        body = response.json()
        assert body["corrected"] == 0
        assert body["article"]["comments_count"] == 1


class TestHealth:
    """GET /health"""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
