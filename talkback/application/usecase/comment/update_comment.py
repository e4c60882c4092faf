"""Update comment use case."""

from pydantic import BaseModel

from talkback.domain.service import CommentService

from .common import CommentItem, parse_comment_id, to_comment_item


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    body: str  # New text content


class UpdateCommentUseCase:
    """Use case for replacing a comment's body."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Counters are untouched.

        Raises:
            ValidationError: If comment_id is not a UUID
            NotFoundError: If the comment does not exist
        """
        comment_id = parse_comment_id(request.comment_id)
        updated = await self.comment_service.update_body(comment_id, request.body)
        return to_comment_item(updated)
