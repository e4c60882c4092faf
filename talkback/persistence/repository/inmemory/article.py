"""In-memory article repository for testing."""

from typing import Optional

from talkback.domain.model.article import Article
from talkback.domain.repository.article import ArticleRepository
from talkback.domain.value import ArticleId, UserId


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    async def find_by_article_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by its external ID."""
        return self._articles.get(article_id)

    async def add_like(self, article_id: ArticleId, user_id: UserId) -> Optional[Article]:
        """Add a like, creating the article on first use."""
        article = self._articles.get(article_id)

        if article is None:
            article = Article(article_id=article_id, likes=[user_id], likes_count=1)
        elif article.is_liked_by(user_id):
            return None
        else:
            # Articles are immutable, store an updated copy
            article = article.model_copy(
                update={
                    "likes": [*article.likes, user_id],
                    "likes_count": article.likes_count + 1,
                }
            )

        self._articles[article_id] = article
        return article

    async def remove_like(
        self, article_id: ArticleId, user_id: UserId
    ) -> Optional[Article]:
        """Remove a like if present."""
        article = self._articles.get(article_id)
        if article is None or not article.is_liked_by(user_id):
            return None

        article = article.model_copy(
            update={
                "likes": [u for u in article.likes if u != user_id],
                "likes_count": max(article.likes_count - 1, 0),
            }
        )
        self._articles[article_id] = article
        return article

    async def increment_counters(
        self,
        article_id: ArticleId,
        comments_delta: int = 0,
        replies_delta: int = 0,
        upsert: bool = False,
    ) -> Optional[Article]:
        """Adjust comment counters, optionally creating the article."""
        article = self._articles.get(article_id)

        if article is None:
            if not upsert:
                return None
            article = Article(article_id=article_id)

        article = article.model_copy(
            update={
                "comments_count": max(article.comments_count + comments_delta, 0),
                "replies_count": max(article.replies_count + replies_delta, 0),
            }
        )
        self._articles[article_id] = article
        return article

    async def save(self, article: Article) -> Article:
        """Save or replace an article."""
        existing = self._articles.get(article.article_id)
        if existing is not None and existing.id != article.id:
            # article_id is unique, the stored row keeps its storage key
            article = article.model_copy(update={"id": existing.id})
        self._articles[article.article_id] = article
        return article
