"""Create comment use case."""

from pydantic import BaseModel

from talkback.domain.service import CommentService
from talkback.domain.value import ArticleId, AuthorSnapshot

from .common import CommentItem, parse_comment_id, to_comment_item


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    article_id: str
    body: str
    author: AuthorSnapshot
    parent: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase:
    """Use case for commenting on an article or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        The service bumps the parent's reply counter and the article
        counters, creating the article aggregate if needed.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If parent is malformed or belongs to another article
            ParentNotFoundError: If parent does not exist
        """
        parent = parse_comment_id(request.parent, "parent") if request.parent else None

        comment = await self.comment_service.create_comment(
            article_id=ArticleId(request.article_id),
            body=request.body,
            author=request.author,
            parent=parent,
        )
        return to_comment_item(comment)
