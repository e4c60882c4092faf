"""Unit tests for UpdateCommentUseCase and DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from talkback.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from talkback.domain.error import NotFoundError, ValidationError
from talkback.domain.service import CommentService
from tests.conftest import make_author
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_comment_body(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment = await comment_service.create_comment("a-1", "Typo", make_author())

        # Act
        response = await use_case.execute(
            UpdateCommentRequest(comment_id=str(comment.id), body="Fixed")
        )

        # Assert
        assert response.id == str(comment.id)
        assert response.body == "Fixed"

    @pytest.mark.asyncio
    async def test_update_unknown_comment(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateCommentRequest(comment_id=str(uuid4()), body="Fixed")
            )

    @pytest.mark.asyncio
    async def test_update_with_malformed_id(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(UpdateCommentRequest(comment_id="nope", body="x"))


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_returns_updated_article(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(DeleteCommentUseCase)
        root = await comment_service.create_comment("a-1", "Root", make_author())
        await comment_service.create_comment("a-1", "Reply", make_author(), root.id)
        await comment_service.create_comment("a-1", "Other", make_author())

        # Act
        response = await use_case.execute(DeleteCommentRequest(comment_id=str(root.id)))

        # Assert
        assert response.article_id == "a-1"
        assert response.comments_count == 1
        assert response.replies_count == 0
