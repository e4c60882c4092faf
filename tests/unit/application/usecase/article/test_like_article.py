"""Unit tests for the article use cases."""

import pytest

from talkback.application.usecase.article import (
    GetArticleRequest,
    GetArticleUseCase,
    LikeArticleRequest,
    LikeArticleUseCase,
    ReconcileArticleRequest,
    ReconcileArticleUseCase,
    UnlikeArticleRequest,
    UnlikeArticleUseCase,
)
from talkback.domain.error import AlreadyLikedError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestArticleUseCases:
    """Tests for get/like/unlike/reconcile article."""

    @pytest.mark.asyncio
    async def test_get_unknown_article_is_empty(self, unit_env):
        use_case = await unit_env.get(GetArticleUseCase)

        response = await use_case.execute(GetArticleRequest(article_id="unseen"))

        assert response.article is None

    @pytest.mark.asyncio
    async def test_like_unlike_round_trip(self, unit_env):
        # Arrange
        like = await unit_env.get(LikeArticleUseCase)
        unlike = await unit_env.get(UnlikeArticleUseCase)
        get = await unit_env.get(GetArticleUseCase)

        # Act
        liked = await like.execute(LikeArticleRequest(article_id="a", user_id="u"))
        unliked = await unlike.execute(UnlikeArticleRequest(article_id="a", user_id="u"))

        # Assert
        assert liked.likes == ["u"]
        assert liked.likes_count == 1
        assert unliked.likes == []
        assert unliked.likes_count == 0
        assert (await get.execute(GetArticleRequest(article_id="a"))).article == unliked

    @pytest.mark.asyncio
    async def test_double_like_raises(self, unit_env):
        like = await unit_env.get(LikeArticleUseCase)
        await like.execute(LikeArticleRequest(article_id="a", user_id="u"))

        with pytest.raises(AlreadyLikedError):
            await like.execute(LikeArticleRequest(article_id="a", user_id="u"))

    @pytest.mark.asyncio
    async def test_reconcile_reports_corrections(self, unit_env):
        # Arrange
        like = await unit_env.get(LikeArticleUseCase)
        reconcile = await unit_env.get(ReconcileArticleUseCase)
        await like.execute(LikeArticleRequest(article_id="a", user_id="u"))

        # Act
        response = await reconcile.execute(ReconcileArticleRequest(article_id="a"))

        # Assert
        assert response.corrected == 0
        assert response.article.likes_count == 1
