"""Like and unlike comment use cases."""

from pydantic import BaseModel

from talkback.domain.service import LikeService
from talkback.domain.value import UserId

from .common import CommentItem, parse_comment_id, to_comment_item


class CommentLikeRequest(BaseModel):
    """Like or unlike comment request."""

    comment_id: str
    user_id: str


class LikeCommentUseCase:
    """Use case for liking a comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize like comment use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: CommentLikeRequest) -> CommentItem:
        """Execute like comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            AlreadyLikedError: If the user already likes the comment
        """
        comment = await self.like_service.like_comment(
            parse_comment_id(request.comment_id), UserId(request.user_id)
        )
        return to_comment_item(comment)


class UnlikeCommentUseCase:
    """Use case for withdrawing a like from a comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize unlike comment use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: CommentLikeRequest) -> CommentItem:
        """Execute unlike comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotLikedError: If the user does not like the comment
        """
        comment = await self.like_service.unlike_comment(
            parse_comment_id(request.comment_id), UserId(request.user_id)
        )
        return to_comment_item(comment)
