"""Reconcile article counters use case."""

from pydantic import BaseModel

from talkback.domain.service import ReconciliationService
from talkback.domain.value import ArticleId

from .common import ArticleItem, to_article_item


class ReconcileArticleRequest(BaseModel):
    """Reconcile article request."""

    article_id: str


class ReconcileArticleResponse(BaseModel):
    """Reconcile article response."""

    article: ArticleItem
    corrected: int
    orphans: int


class ReconcileArticleUseCase:
    """Use case for recomputing an article's denormalized counters."""

    def __init__(self, reconciliation_service: ReconciliationService) -> None:
        """Initialize reconcile article use case.

        Args:
            reconciliation_service: Reconciliation domain service
        """
        self.reconciliation_service = reconciliation_service

    async def execute(self, request: ReconcileArticleRequest) -> ReconcileArticleResponse:
        """Execute reconciliation for one article.

        Args:
            request: Reconcile article request

        Returns:
            Repaired article with the number of rewritten documents

        Raises:
            NotFoundError: If neither the article nor any of its comments exist
        """
        report = await self.reconciliation_service.reconcile_article(
            ArticleId(request.article_id)
        )
        return ReconcileArticleResponse(
            article=to_article_item(report.article),
            corrected=report.corrected,
            orphans=report.orphans,
        )
