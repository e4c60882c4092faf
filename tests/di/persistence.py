"""Mock persistence providers for testing."""

from dishka import Scope, provide

from talkback.domain.repository import ArticleRepository, CommentRepository
from talkback.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryCommentRepository,
)
from talkback.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope: every container gets fresh repositories, and every
    request opened on that container (e.g. each TestClient call) sees the
    same data.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_article_repository(self) -> ArticleRepository:
        """Provide in-memory article repository."""
        return InMemoryArticleRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()
