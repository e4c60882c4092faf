"""Unit tests for ArticleService."""

import pytest

from talkback.domain.error import NotFoundError
from talkback.domain.service import ArticleService
from talkback.domain.value import ArticleId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestArticleService:
    """Tests for the article aggregate counters."""

    @pytest.mark.asyncio
    async def test_get_unknown_article_returns_none(self, unit_env):
        """An article nobody interacted with does not exist yet."""
        article_service = await unit_env.get(ArticleService)

        assert await article_service.get_article(ArticleId("fresh")) is None

    @pytest.mark.asyncio
    async def test_record_comment_created_upserts(self, unit_env):
        """Root and reply creations bump separate counters, creating the article."""
        # Arrange
        article_service = await unit_env.get(ArticleService)
        article_id = ArticleId("upsert-me")

        # Act
        await article_service.record_comment_created(article_id, is_reply=False)
        article = await article_service.record_comment_created(article_id, is_reply=True)

        # Assert
        assert article.comments_count == 1
        assert article.replies_count == 1
        assert await article_service.get_article(article_id) == article

    @pytest.mark.asyncio
    async def test_record_comments_deleted_applies_both_deltas(self, unit_env):
        """Deletions subtract roots and replies in one update."""
        # Arrange
        article_service = await unit_env.get(ArticleService)
        article_id = ArticleId("shrinking")
        await article_service.record_comment_created(article_id, is_reply=False)
        for _ in range(3):
            await article_service.record_comment_created(article_id, is_reply=True)

        # Act
        article = await article_service.record_comments_deleted(
            article_id, roots_deleted=1, replies_deleted=2
        )

        # Assert
        assert article.comments_count == 0
        assert article.replies_count == 1

    @pytest.mark.asyncio
    async def test_record_comments_deleted_on_missing_article_raises(self, unit_env):
        """Decrements never create an article."""
        article_service = await unit_env.get(ArticleService)

        with pytest.raises(NotFoundError):
            await article_service.record_comments_deleted(
                ArticleId("ghost"), roots_deleted=1, replies_deleted=0
            )
