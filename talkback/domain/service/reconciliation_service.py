"""Counter reconciliation domain service."""

from collections import Counter
from dataclasses import dataclass

import logfire

from talkback.domain.error import NotFoundError
from talkback.domain.model import Article
from talkback.domain.repository import ArticleRepository, CommentRepository
from talkback.domain.value import ArticleId, UserId

from .base import Service


@dataclass
class ReconciliationReport:
    """Outcome of a reconciliation run."""

    article: Article
    corrected: int  # Documents whose counters were rewritten
    orphans: int  # Replies whose parent no longer exists


def _unique(likes: list[UserId]) -> list[UserId]:
    return list(dict.fromkeys(likes))


class ReconciliationService(Service):
    """Recomputes denormalized counters from the comments actually stored.

    Counters are maintained by sequential, non-transactional updates; an
    aborted request can leave them off by a few. This is the repair path.
    """

    def __init__(
        self,
        article_repository: ArticleRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize reconciliation service.

        Args:
            article_repository: Article repository
            comment_repository: Comment repository
        """
        self.article_repository = article_repository
        self.comment_repository = comment_repository

    async def reconcile_article(self, article_id: ArticleId) -> ReconciliationReport:
        """Rewrite every counter of an article and its comments that drifted.

        Args:
            article_id: External article ID

        Returns:
            Report with the repaired article

        Raises:
            NotFoundError: If neither the article nor any of its comments exist
        """
        with logfire.span("reconciliation_service.reconcile_article", article_id=article_id):
            article = await self.article_repository.find_by_article_id(article_id)
            comments = await self.comment_repository.find_all_by_article(article_id)

            if article is None and not comments:
                raise NotFoundError("Article", article_id)

            known_ids = {comment.id for comment in comments}
            children = Counter(c.parent for c in comments if c.parent is not None)
            orphans = sum(
                1 for c in comments if c.parent is not None and c.parent not in known_ids
            )
            if orphans:
                logfire.warn("Orphaned replies found", article_id=article_id, orphans=orphans)

            corrected = 0
            for comment in comments:
                likes = _unique(comment.likes)
                expected = comment.model_copy(
                    update={
                        "likes": likes,
                        "likes_count": len(likes),
                        "replies_count": children.get(comment.id, 0),
                    }
                )
                if expected != comment:
                    await self.comment_repository.save(expected)
                    corrected += 1

            roots = sum(1 for comment in comments if comment.is_root)
            base = article or Article(article_id=article_id)
            likes = _unique(base.likes)
            expected_article = base.model_copy(
                update={
                    "likes": likes,
                    "likes_count": len(likes),
                    "comments_count": roots,
                    "replies_count": len(comments) - roots,
                }
            )
            if article is None or expected_article != article:
                expected_article = await self.article_repository.save(expected_article)
                corrected += 1

            logfire.info(
                "Article counters reconciled",
                article_id=article_id,
                comments=len(comments),
                corrected=corrected,
                orphans=orphans,
            )
            return ReconciliationReport(
                article=expected_article, corrected=corrected, orphans=orphans
            )
