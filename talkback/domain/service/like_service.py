"""Like domain service."""

import logfire

from talkback.domain.error import AlreadyLikedError, NotFoundError, NotLikedError
from talkback.domain.model import Article, Comment
from talkback.domain.repository import ArticleRepository, CommentRepository
from talkback.domain.value import ArticleId, CommentId, UserId

from .base import Service


class LikeService(Service):
    """Domain service for like toggles on articles and comments.

    Every toggle reads the target first to report a precise error, then
    applies a single guarded update. The guard re-checks membership in the
    store, so a concurrent duplicate is reported instead of double-counted.
    """

    def __init__(
        self,
        article_repository: ArticleRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize like service.

        Args:
            article_repository: Article repository
            comment_repository: Comment repository
        """
        self.article_repository = article_repository
        self.comment_repository = comment_repository

    async def like_article(self, article_id: ArticleId, user_id: UserId) -> Article:
        """Like an article, creating its aggregate on first use.

        Args:
            article_id: External article ID
            user_id: Liking user

        Returns:
            Article after the like

        Raises:
            AlreadyLikedError: If the user already likes the article
        """
        with logfire.span("like_article", article_id=article_id, user_id=user_id):
            article = await self.article_repository.find_by_article_id(article_id)
            if article and article.is_liked_by(user_id):
                logfire.warn(
                    "Duplicate article like attempt",
                    article_id=article_id,
                    user_id=user_id,
                )
                raise AlreadyLikedError("article", article_id, user_id)

            updated = await self.article_repository.add_like(article_id, user_id)
            if updated is None:
                # Another request added the same like in between
                logfire.warn(
                    "Concurrent duplicate article like",
                    article_id=article_id,
                    user_id=user_id,
                )
                raise AlreadyLikedError("article", article_id, user_id)

            logfire.info(
                "Article liked",
                article_id=article_id,
                user_id=user_id,
                created=article is None,
                likes_count=updated.likes_count,
            )
            return updated

    async def unlike_article(self, article_id: ArticleId, user_id: UserId) -> Article:
        """Remove a user's like from an article.

        Args:
            article_id: External article ID
            user_id: Unliking user

        Returns:
            Article after the unlike

        Raises:
            NotFoundError: If the article does not exist
            NotLikedError: If the user does not like the article
        """
        with logfire.span("unlike_article", article_id=article_id, user_id=user_id):
            article = await self.article_repository.find_by_article_id(article_id)
            if not article:
                logfire.warn("Unlike on non-existent article", article_id=article_id)
                raise NotFoundError("Article", article_id)

            if not article.is_liked_by(user_id):
                logfire.warn(
                    "Unlike without like", article_id=article_id, user_id=user_id
                )
                raise NotLikedError("article", article_id, user_id)

            updated = await self.article_repository.remove_like(article_id, user_id)
            if updated is None:
                raise NotLikedError("article", article_id, user_id)

            logfire.info(
                "Article unliked",
                article_id=article_id,
                user_id=user_id,
                likes_count=updated.likes_count,
            )
            return updated

    async def like_comment(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Like a comment.

        Args:
            comment_id: Comment ID
            user_id: Liking user

        Returns:
            Comment after the like

        Raises:
            NotFoundError: If the comment does not exist
            AlreadyLikedError: If the user already likes the comment
        """
        with logfire.span(
            "like_comment", comment_id=str(comment_id), user_id=user_id
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Like on non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if comment.is_liked_by(user_id):
                logfire.warn(
                    "Duplicate comment like attempt",
                    comment_id=str(comment_id),
                    user_id=user_id,
                )
                raise AlreadyLikedError("comment", str(comment_id), user_id)

            updated = await self.comment_repository.add_like(comment_id, user_id)
            if updated is None:
                raise AlreadyLikedError("comment", str(comment_id), user_id)

            logfire.info(
                "Comment liked",
                comment_id=str(comment_id),
                user_id=user_id,
                likes_count=updated.likes_count,
            )
            return updated

    async def unlike_comment(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Remove a user's like from a comment.

        Args:
            comment_id: Comment ID
            user_id: Unliking user

        Returns:
            Comment after the unlike

        Raises:
            NotFoundError: If the comment does not exist
            NotLikedError: If the user does not like the comment
        """
        with logfire.span(
            "unlike_comment", comment_id=str(comment_id), user_id=user_id
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn(
                    "Unlike on non-existent comment", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            if not comment.is_liked_by(user_id):
                logfire.warn(
                    "Unlike without like",
                    comment_id=str(comment_id),
                    user_id=user_id,
                )
                raise NotLikedError("comment", str(comment_id), user_id)

            updated = await self.comment_repository.remove_like(comment_id, user_id)
            if updated is None:
                raise NotLikedError("comment", str(comment_id), user_id)

            logfire.info(
                "Comment unliked",
                comment_id=str(comment_id),
                user_id=user_id,
                likes_count=updated.likes_count,
            )
            return updated
