"""Get comments use case."""

from pydantic import BaseModel

from talkback.config import CommentSettings
from talkback.domain.repository import ParentFilter
from talkback.domain.service import CommentService
from talkback.domain.value import (
    ArticleId,
    CommentSortOrder,
    Pagination,
    ParentScope,
)

from .common import CommentItem, parse_comment_id, to_comment_item

# Values of `parent` that select root comments
ROOT_PARENT_VALUES = frozenset({"", "null", "root"})


class GetCommentsRequest(BaseModel):
    """Get comments request.

    Query values are kept raw, the use case validates them.
    """

    article_id: str
    parent: str | None = None  # Absent: every comment of the article
    sort_by: str | None = None
    page: str | None = None
    limit: str | None = None


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    article_id: str
    comments: list[CommentItem]
    page: int
    limit: int


def parse_parent_filter(raw: str | None) -> ParentFilter:
    """Resolve the `parent` query value.

    Args:
        raw: Query value, None when the parameter was not sent

    Returns:
        ParentScope.ANY, ParentScope.ROOT or a parent comment ID

    Raises:
        ValidationError: If raw is neither a root marker nor a comment UUID
    """
    if raw is None:
        return ParentScope.ANY
    if raw.strip().lower() in ROOT_PARENT_VALUES:
        return ParentScope.ROOT
    return parse_comment_id(raw.strip(), "parent")


class GetCommentsUseCase:
    """Use case for listing one page of an article's comments."""

    def __init__(
        self,
        comment_service: CommentService,
        settings: CommentSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            settings: Comment settings (page size defaults and bounds)
        """
        self.comment_service = comment_service
        self.settings = settings

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        All query values are validated before the store is queried.

        Args:
            request: Get comments request

        Returns:
            Page of comments

        Raises:
            InvalidPaginationError: If page or limit is malformed
            ValidationError: If parent is malformed
        """
        pagination = Pagination.parse(
            page=request.page,
            limit=request.limit,
            default_limit=self.settings.default_page_limit,
            max_limit=self.settings.max_page_limit,
        )
        parent = parse_parent_filter(request.parent)
        sort = CommentSortOrder.parse(request.sort_by)

        comments = await self.comment_service.list_comments(
            ArticleId(request.article_id),
            pagination,
            parent=parent,
            sort=sort,
        )

        return GetCommentsResponse(
            article_id=request.article_id,
            comments=[to_comment_item(comment) for comment in comments],
            page=pagination.page,
            limit=pagination.limit,
        )
