"""Application layer DI providers."""

from dishka import Scope, provide

from talkback.application.usecase.article import (
    GetArticleUseCase,
    LikeArticleUseCase,
    ReconcileArticleUseCase,
    UnlikeArticleUseCase,
)
from talkback.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
    UpdateCommentUseCase,
)
from talkback.config import CommentSettings
from talkback.domain.service import (
    ArticleService,
    CommentService,
    LikeService,
    ReconciliationService,
)
from talkback.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Article use cases
    @provide(scope=Scope.REQUEST)
    def get_get_article_use_case(
        self, article_service: ArticleService
    ) -> GetArticleUseCase:
        """Provide get article use case."""
        return GetArticleUseCase(article_service=article_service)

    @provide(scope=Scope.REQUEST)
    def get_like_article_use_case(self, like_service: LikeService) -> LikeArticleUseCase:
        """Provide like article use case."""
        return LikeArticleUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_article_use_case(
        self, like_service: LikeService
    ) -> UnlikeArticleUseCase:
        """Provide unlike article use case."""
        return UnlikeArticleUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_reconcile_article_use_case(
        self, reconciliation_service: ReconciliationService
    ) -> ReconcileArticleUseCase:
        """Provide reconcile article use case."""
        return ReconcileArticleUseCase(reconciliation_service=reconciliation_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_like_comment_use_case(self, like_service: LikeService) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_comment_use_case(
        self, like_service: LikeService
    ) -> UnlikeCommentUseCase:
        """Provide unlike comment use case."""
        return UnlikeCommentUseCase(like_service=like_service)
