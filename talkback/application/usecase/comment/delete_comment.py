"""Delete comment use case."""

from pydantic import BaseModel

from talkback.application.usecase.article.common import ArticleItem, to_article_item
from talkback.domain.service import CommentService

from .common import parse_comment_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str


class DeleteCommentUseCase:
    """Use case for deleting a comment and all replies below it."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> ArticleItem:
        """Execute delete comment flow.

        Returns:
            The owning article with reduced counters

        Raises:
            ValidationError: If comment_id is not a UUID
            NotFoundError: If the comment or its article does not exist
            DeletionFailedError: If part of the subtree vanished mid-delete
        """
        comment_id = parse_comment_id(request.comment_id)
        article = await self.comment_service.delete_comment(comment_id)
        return to_article_item(article)
