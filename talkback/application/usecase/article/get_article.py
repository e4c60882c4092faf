"""Get article use case."""

from pydantic import BaseModel

from talkback.domain.service import ArticleService
from talkback.domain.value import ArticleId

from .common import ArticleItem, to_article_item


class GetArticleRequest(BaseModel):
    """Get article request."""

    article_id: str


class GetArticleResponse(BaseModel):
    """Get article response.

    article is None when nobody has liked or commented on it yet.
    """

    article: ArticleItem | None


class GetArticleUseCase:
    """Use case for reading an article aggregate."""

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize get article use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(self, request: GetArticleRequest) -> GetArticleResponse:
        """Execute get article flow.

        Args:
            request: Get article request

        Returns:
            The aggregate, or an empty response for an unknown article
        """
        article = await self.article_service.get_article(ArticleId(request.article_id))
        return GetArticleResponse(article=to_article_item(article) if article else None)
