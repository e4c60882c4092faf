"""Like article use case."""

from pydantic import BaseModel

from talkback.domain.service import LikeService
from talkback.domain.value import ArticleId, UserId

from .common import ArticleItem, to_article_item


class LikeArticleRequest(BaseModel):
    """Like article request."""

    article_id: str
    user_id: str


class LikeArticleUseCase:
    """Use case for liking an article, creating its aggregate on first like."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize like article use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikeArticleRequest) -> ArticleItem:
        """Execute like article flow.

        Args:
            request: Like article request

        Returns:
            The article after the like

        Raises:
            AlreadyLikedError: If the user already likes the article
        """
        article = await self.like_service.like_article(
            ArticleId(request.article_id), UserId(request.user_id)
        )
        return to_article_item(article)
