"""Integration tests for the PostgreSQL repositories.

Require a reachable PostgreSQL at DATABASE__URL. Run with `pytest -m integration`.
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from talkback.domain.repository import ArticleRepository, CommentRepository
from talkback.domain.service import CommentService, LikeService
from talkback.domain.value import ArticleId, CommentSortOrder, ParentScope, UserId
from talkback.persistence.tables import metadata
from tests.conftest import make_author, make_comment, minutes_ago
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def pg_env(integration_env):
    """Integration environment with the schema in place."""
    engine = await integration_env.get(AsyncEngine)
    async with engine.begin() as conn:
        await conn.execute(text('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"'))
        await conn.run_sync(metadata.create_all)
    return integration_env


def new_article_id() -> ArticleId:
    return ArticleId(f"it-{uuid4().hex}")


class TestPostgresArticleRepository:
    """Guarded upserts on the articles table."""

    @pytest.mark.asyncio
    async def test_add_like_upserts_and_guards(self, pg_env):
        # Arrange
        article_repo = await pg_env.get(ArticleRepository)
        article_id = new_article_id()

        # Act
        created = await article_repo.add_like(article_id, UserId("alice"))
        appended = await article_repo.add_like(article_id, UserId("bob"))
        duplicate = await article_repo.add_like(article_id, UserId("alice"))

        # Assert
        assert created.likes == ["alice"]
        assert created.likes_count == 1
        assert appended.likes == ["alice", "bob"]
        assert appended.likes_count == 2
        assert duplicate is None

    @pytest.mark.asyncio
    async def test_remove_like_is_guarded(self, pg_env):
        article_repo = await pg_env.get(ArticleRepository)
        article_id = new_article_id()
        await article_repo.add_like(article_id, UserId("alice"))

        assert await article_repo.remove_like(article_id, UserId("bob")) is None
        removed = await article_repo.remove_like(article_id, UserId("alice"))
        assert removed.likes == []
        assert removed.likes_count == 0

    @pytest.mark.asyncio
    async def test_increment_counters(self, pg_env):
        article_repo = await pg_env.get(ArticleRepository)
        article_id = new_article_id()

        assert await article_repo.increment_counters(article_id, comments_delta=1) is None
        created = await article_repo.increment_counters(
            article_id, comments_delta=1, upsert=True
        )
        updated = await article_repo.increment_counters(
            article_id, comments_delta=-1, replies_delta=2
        )

        assert created.comments_count == 1
        assert updated.comments_count == 0
        assert updated.replies_count == 2


class TestPostgresCommentRepository:
    """Comment queries and guarded updates."""

    @pytest.mark.asyncio
    async def test_round_trip_and_listing(self, pg_env):
        # Arrange
        comment_repo = await pg_env.get(CommentRepository)
        article_id = new_article_id()
        old = await comment_repo.save(
            make_comment(article_id, likes=["a"], created_at=minutes_ago(5))
        )
        new = await comment_repo.save(make_comment(article_id, created_at=minutes_ago(1)))
        reply = await comment_repo.save(make_comment(article_id, parent=old.id))

        # Act
        fetched = await comment_repo.find_by_id(old.id)
        newest = await comment_repo.find_by_article(
            article_id, parent=ParentScope.ROOT, sort=CommentSortOrder.NEWEST
        )
        popular = await comment_repo.find_by_article(
            article_id, parent=ParentScope.ROOT, sort=CommentSortOrder.POPULAR
        )
        children = await comment_repo.find_children(old.id)

        # Assert
        assert fetched.author == old.author
        assert fetched.likes == ["a"]
        assert [c.id for c in newest] == [new.id, old.id]
        assert [c.id for c in popular] == [old.id, new.id]
        assert [c.id for c in children] == [reply.id]

    @pytest.mark.asyncio
    async def test_delete_returns_deleted_row(self, pg_env):
        comment_repo = await pg_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(new_article_id()))

        deleted = await comment_repo.delete(comment.id)

        assert deleted.id == comment.id
        assert await comment_repo.delete(comment.id) is None

    @pytest.mark.asyncio
    async def test_comment_likes_are_guarded(self, pg_env):
        comment_repo = await pg_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(new_article_id()))

        liked = await comment_repo.add_like(comment.id, UserId("alice"))

        assert liked.likes == ["alice"]
        assert await comment_repo.add_like(comment.id, UserId("alice")) is None
        assert (await comment_repo.remove_like(comment.id, UserId("alice"))).likes == []


class TestServicesOnPostgres:
    """Domain services against the real store."""

    @pytest.mark.asyncio
    async def test_create_and_delete_subtree(self, pg_env):
        # Arrange
        comment_service = await pg_env.get(CommentService)
        like_service = await pg_env.get(LikeService)
        article_id = new_article_id()
        author = make_author()

        root = await comment_service.create_comment(article_id, "R", author)
        child = await comment_service.create_comment(article_id, "C", author, root.id)
        await comment_service.create_comment(article_id, "G", author, child.id)
        await like_service.like_article(article_id, UserId("alice"))

        # Act
        article = await comment_service.delete_comment(root.id)

        # Assert
        assert article.comments_count == 0
        assert article.replies_count == 0
        assert article.likes == ["alice"]
