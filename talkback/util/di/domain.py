"""Domain layer DI providers."""

from dishka import Scope, provide

from talkback.config import CommentSettings
from talkback.domain.repository import ArticleRepository, CommentRepository
from talkback.domain.service import (
    ArticleService,
    CommentService,
    LikeService,
    ReconciliationService,
)
from talkback.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_article_service(
        self, article_repository: ArticleRepository
    ) -> ArticleService:
        """Provide article aggregate service."""
        return ArticleService(article_repository=article_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        article_service: ArticleService,
        settings: CommentSettings,
    ) -> CommentService:
        """Provide comment tree service."""
        return CommentService(
            comment_repository=comment_repository,
            article_service=article_service,
            settings=settings,
        )

    @provide
    def get_like_service(
        self,
        article_repository: ArticleRepository,
        comment_repository: CommentRepository,
    ) -> LikeService:
        """Provide like toggle service."""
        return LikeService(
            article_repository=article_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_reconciliation_service(
        self,
        article_repository: ArticleRepository,
        comment_repository: CommentRepository,
    ) -> ReconciliationService:
        """Provide counter reconciliation service."""
        return ReconciliationService(
            article_repository=article_repository,
            comment_repository=comment_repository,
        )
