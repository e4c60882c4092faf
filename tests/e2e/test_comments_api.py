"""End-to-end tests for the comment endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from talkback.interface.api.app import create_app
from tests.di import build_test_container

AUTHOR = {"_id": "user-1", "name": "Ada", "img": "https://example.com/ada.png"}


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    return TestClient(create_app(container=build_test_container()))


def post_comment(client, article_id="article-1", body="Hello", parent=None):
    payload = {"article_id": article_id, "comment_body": body, "author": AUTHOR}
    if parent is not None:
        payload["parent"] = parent
    response = client.post("/comments", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


class TestCreateComment:
    """POST /comments"""

    def test_create_root_comment(self, client):
        # Act
        comment = post_comment(client)

        # Assert
        assert comment["article_id"] == "article-1"
        assert comment["body"] == "Hello"
        assert comment["parent"] is None
        assert comment["likes"] == []
        assert comment["likes_count"] == 0
        assert comment["replies_count"] == 0
        assert comment["author"] == {
            "id": "user-1",
            "name": "Ada",
            "image": "https://example.com/ada.png",
        }

        article = client.get("/articles", params={"article_id": "article-1"}).json()
        assert article["comments_count"] == 1
        assert article["replies_count"] == 0

    def test_create_reply_updates_parent(self, client):
        # Arrange
        root = post_comment(client)

        # Act
        reply = post_comment(client, body="Reply", parent=root["id"])

        # Assert
        assert reply["parent"] == root["id"]
        parent = client.get(f"/comments/{root['id']}").json()
        assert parent["replies_count"] == 1

    def test_missing_fields_are_400(self, client):
        response = client.post("/comments", json={"article_id": "article-1"})

        assert response.status_code == 400
        assert "comment_body" in response.json()["detail"]

    def test_empty_body_is_400(self, client):
        response = client.post(
            "/comments",
            json={"article_id": "article-1", "comment_body": "", "author": AUTHOR},
        )

        assert response.status_code == 400

    def test_unknown_parent_is_404(self, client):
        response = client.post(
            "/comments",
            json={
                "article_id": "article-1",
                "comment_body": "Reply",
                "author": AUTHOR,
                "parent": str(uuid4()),
            },
        )

        assert response.status_code == 404

    def test_parent_from_other_article_is_400(self, client):
        other = post_comment(client, article_id="article-2")

        response = client.post(
            "/comments",
            json={
                "article_id": "article-1",
                "comment_body": "Reply",
                "author": AUTHOR,
                "parent": other["id"],
            },
        )

        assert response.status_code == 400


class TestListComments:
    """GET /comments"""

    def test_pagination_and_sort(self, client):
        # Arrange
        bodies = [post_comment(client, body=f"#{i}")["body"] for i in range(7)]

        # Act
        first = client.get(
            "/comments", params={"article_id": "article-1", "sort_by": "oldest"}
        )
        second = client.get(
            "/comments",
            params={"article_id": "article-1", "sort_by": "oldest", "page": 2},
        )

        # Assert
        assert first.status_code == 200
        assert [c["body"] for c in first.json()] == bodies[:5]
        assert [c["body"] for c in second.json()] == bodies[5:]

    def test_parent_filter(self, client):
        # Arrange
        root = post_comment(client, body="root")
        post_comment(client, body="reply", parent=root["id"])

        # Act
        everything = client.get("/comments", params={"article_id": "article-1"}).json()
        roots = client.get(
            "/comments", params={"article_id": "article-1", "parent": ""}
        ).json()
        replies = client.get(
            "/comments", params={"article_id": "article-1", "parent": root["id"]}
        ).json()

        # Assert
        assert len(everything) == 2
        assert [c["body"] for c in roots] == ["root"]
        assert [c["body"] for c in replies] == ["reply"]

    @pytest.mark.parametrize(
        "params",
        [{"page": "0"}, {"page": "1.5"}, {"limit": "abc"}, {"parent": "not-a-uuid"}],
    )
    def test_invalid_query_is_400(self, client, params):
        response = client.get("/comments", params={"article_id": "article-1", **params})

        assert response.status_code == 400
        assert "Invalid request" in response.json()["detail"]

    def test_missing_article_id_is_400(self, client):
        assert client.get("/comments").status_code == 400


class TestGetComment:
    """GET /comments/{comment_id}"""

    def test_unknown_comment_is_404(self, client):
        assert client.get(f"/comments/{uuid4()}").status_code == 404

    def test_malformed_id_is_400(self, client):
        assert client.get("/comments/xyz").status_code == 400


class TestUpdateComment:
    """PATCH /comments"""

    def test_update_body(self, client):
        comment = post_comment(client)

        response = client.patch(
            "/comments", json={"comment_id": comment["id"], "update": "Edited"}
        )

        assert response.status_code == 200
        assert response.json()["body"] == "Edited"

    def test_update_unknown_is_404(self, client):
        response = client.patch(
            "/comments", json={"comment_id": str(uuid4()), "update": "Edited"}
        )

        assert response.status_code == 404

    def test_update_missing_fields_is_400(self, client):
        assert client.patch("/comments", json={}).status_code == 400


class TestDeleteComment:
    """DELETE /comments"""

    def test_delete_subtree_returns_article(self, client):
        # Arrange
        root = post_comment(client)
        reply = post_comment(client, body="r", parent=root["id"])
        post_comment(client, body="rr", parent=reply["id"])

        # Act
        response = client.request("DELETE", "/comments", json={"comment_id": root["id"]})

        # Assert
        assert response.status_code == 200
        article = response.json()
        assert article["article_id"] == "article-1"
        assert article["comments_count"] == 0
        assert article["replies_count"] == 0
        assert client.get(f"/comments/{reply['id']}").status_code == 404

    def test_delete_unknown_is_404(self, client):
        response = client.request("DELETE", "/comments", json={"comment_id": str(uuid4())})

        assert response.status_code == 404

    def test_delete_without_id_is_400(self, client):
        assert client.request("DELETE", "/comments", json={}).status_code == 400


class TestCommentLikes:
    """POST /comments/like and /comments/unlike"""

    def test_like_unlike(self, client):
        # Arrange
        comment = post_comment(client)
        payload = {"comment_id": comment["id"], "user_id": "bob"}

        # Act
        liked = client.post("/comments/like", json=payload)
        again = client.post("/comments/like", json=payload)
        unliked = client.post("/comments/unlike", json=payload)
        unliked_again = client.post("/comments/unlike", json=payload)

        # Assert
        assert liked.status_code == 200
        assert liked.json()["likes"] == ["bob"]
        assert again.status_code == 409
        assert unliked.status_code == 200
        assert unliked.json()["likes_count"] == 0
        assert unliked_again.status_code == 409

    def test_like_unknown_comment_is_404(self, client):
        response = client.post(
            "/comments/like", json={"comment_id": str(uuid4()), "user_id": "bob"}
        )

        assert response.status_code == 404
