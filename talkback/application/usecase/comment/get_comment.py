"""Get comment use case."""

from pydantic import BaseModel

from talkback.domain.error import NotFoundError
from talkback.domain.service import CommentService

from .common import CommentItem, parse_comment_id, to_comment_item


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str


class GetCommentUseCase:
    """Use case for reading a single comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Execute get comment flow.

        Raises:
            ValidationError: If comment_id is not a UUID
            NotFoundError: If the comment does not exist
        """
        comment_id = parse_comment_id(request.comment_id)
        comment = await self.comment_service.get_comment_by_id(comment_id)

        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        return to_comment_item(comment)
