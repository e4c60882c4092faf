"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from talkback.domain.model.article import Article
from talkback.domain.value import ArticleId, UserId


class ArticleRepository(ABC):
    """Repository for the Article aggregate.

    Articles are addressed by their external article_id. Every mutating
    method applies its counter change and its set change in one store
    update, so a crash can never leave one without the other.
    """

    @abstractmethod
    async def find_by_article_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by its external ID.

        Args:
            article_id: External article identifier

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def add_like(self, article_id: ArticleId, user_id: UserId) -> Optional[Article]:
        """Add a like, creating the article if it does not exist yet.

        Single upsert: a missing article is inserted with likes=[user_id]
        and likes_count=1; an existing one gets likes_count + 1 and user_id
        appended, but only if user_id is not already in likes.

        Args:
            article_id: External article identifier
            user_id: Liking user

        Returns:
            The updated article, or None if user_id had already liked it
        """
        pass

    @abstractmethod
    async def remove_like(
        self, article_id: ArticleId, user_id: UserId
    ) -> Optional[Article]:
        """Remove a like.

        Decrements likes_count and pulls user_id from likes, only if the
        article exists and user_id is in likes.

        Args:
            article_id: External article identifier
            user_id: Unliking user

        Returns:
            The updated article, or None if nothing matched
        """
        pass

    @abstractmethod
    async def increment_counters(
        self,
        article_id: ArticleId,
        comments_delta: int = 0,
        replies_delta: int = 0,
        upsert: bool = False,
    ) -> Optional[Article]:
        """Adjust comments_count/replies_count in one update.

        Args:
            article_id: External article identifier
            comments_delta: Change applied to comments_count (may be negative)
            replies_delta: Change applied to replies_count (may be negative)
            upsert: Create the article with the deltas as initial counters
                when it does not exist

        Returns:
            The updated article, or None if it does not exist and upsert is False
        """
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or replace by article_id).

        Args:
            article: The article to save

        Returns:
            The saved article
        """
        pass
