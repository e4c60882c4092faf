"""Article aggregate domain service."""

import logfire

from talkback.domain.error import NotFoundError
from talkback.domain.model.article import Article
from talkback.domain.repository import ArticleRepository
from talkback.domain.value import ArticleId

from .base import Service


class ArticleService(Service):
    """Domain service for the per-article aggregate counters."""

    def __init__(self, article_repository: ArticleRepository) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
        """
        self.article_repository = article_repository

    async def get_article(self, article_id: ArticleId) -> Article | None:
        """Get an article aggregate by its external ID.

        Args:
            article_id: External article ID

        Returns:
            Article if it has ever been liked or commented on, None otherwise
        """
        with logfire.span("article_service.get_article", article_id=article_id):
            article = await self.article_repository.find_by_article_id(article_id)
            if article:
                logfire.info("Article found", article_id=article_id)
            else:
                logfire.info("Article not created yet", article_id=article_id)
            return article

    async def record_comment_created(
        self, article_id: ArticleId, is_reply: bool
    ) -> Article:
        """Count a new comment on the article, creating the article if needed.

        Args:
            article_id: External article ID
            is_reply: True for replies (replies_count), False for root
                comments (comments_count)

        Returns:
            Updated article
        """
        with logfire.span(
            "article_service.record_comment_created",
            article_id=article_id,
            is_reply=is_reply,
        ):
            article = await self.article_repository.increment_counters(
                article_id,
                comments_delta=0 if is_reply else 1,
                replies_delta=1 if is_reply else 0,
                upsert=True,
            )
            # upsert always yields a document
            assert article is not None
            logfire.info(
                "Article comment counters incremented",
                article_id=article_id,
                comments_count=article.comments_count,
                replies_count=article.replies_count,
            )
            return article

    async def record_comments_deleted(
        self, article_id: ArticleId, roots_deleted: int, replies_deleted: int
    ) -> Article:
        """Subtract deleted comments from the article counters in one update.

        Args:
            article_id: External article ID
            roots_deleted: Number of root comments removed
            replies_deleted: Number of replies removed

        Returns:
            Updated article

        Raises:
            NotFoundError: If the article does not exist
        """
        with logfire.span(
            "article_service.record_comments_deleted",
            article_id=article_id,
            roots_deleted=roots_deleted,
            replies_deleted=replies_deleted,
        ):
            article = await self.article_repository.increment_counters(
                article_id,
                comments_delta=-roots_deleted,
                replies_delta=-replies_deleted,
            )
            if article is None:
                logfire.error(
                    "Article not found for updating comment counts",
                    article_id=article_id,
                )
                raise NotFoundError("Article", article_id)

            logfire.info(
                "Article comment counters decremented",
                article_id=article_id,
                comments_count=article.comments_count,
                replies_count=article.replies_count,
            )
            return article
