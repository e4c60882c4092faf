"""Unlike article use case."""

from pydantic import BaseModel

from talkback.domain.service import LikeService
from talkback.domain.value import ArticleId, UserId

from .common import ArticleItem, to_article_item


class UnlikeArticleRequest(BaseModel):
    """Unlike article request."""

    article_id: str
    user_id: str


class UnlikeArticleUseCase:
    """Use case for withdrawing a like from an article."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize unlike article use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: UnlikeArticleRequest) -> ArticleItem:
        """Execute unlike article flow.

        Raises:
            NotFoundError: If the article does not exist
            NotLikedError: If the user does not like the article
        """
        article = await self.like_service.unlike_article(
            ArticleId(request.article_id), UserId(request.user_id)
        )
        return to_article_item(article)
