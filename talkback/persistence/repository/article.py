"""PostgreSQL implementation of Article repository."""

from typing import Optional

from sqlalchemy import func, literal, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.types import Text

from talkback.domain.model import Article
from talkback.domain.repository import ArticleRepository
from talkback.domain.value import ArticleId, UserId
from talkback.persistence.database import store_call
from talkback.persistence.mappers import article_to_dict, row_to_article
from talkback.persistence.tables import articles_table


def _user(user_id: UserId):
    return literal(user_id, Text)


def _clamped(column, delta: int):
    """Column plus delta, never below zero."""
    return func.greatest(column + delta, 0)


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @store_call
    async def find_by_article_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by its external ID."""
        stmt = select(articles_table).where(articles_table.c.article_id == article_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    @store_call
    async def add_like(self, article_id: ArticleId, user_id: UserId) -> Optional[Article]:
        """Add a like in a single guarded upsert.

        The unique article_id index turns two concurrent first likes into
        one insert and one conflict update, so the article exists once.
        """
        stmt = insert(articles_table).values(
            article_id=article_id,
            likes=[user_id],
            likes_count=1,
            comments_count=0,
            replies_count=0,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[articles_table.c.article_id],
            set_={
                "likes": func.array_append(articles_table.c.likes, _user(user_id)),
                "likes_count": articles_table.c.likes_count + 1,
            },
            where=~articles_table.c.likes.any(user_id),
        ).returning(articles_table)

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            # Conflict row already held this user
            return None

        await self.session.flush()
        return row_to_article(row._asdict())

    @store_call
    async def remove_like(
        self, article_id: ArticleId, user_id: UserId
    ) -> Optional[Article]:
        """Remove a like only if the user is in the likes set."""
        stmt = (
            update(articles_table)
            .where(articles_table.c.article_id == article_id)
            .where(articles_table.c.likes.any(user_id))
            .values(
                likes=func.array_remove(articles_table.c.likes, _user(user_id)),
                likes_count=_clamped(articles_table.c.likes_count, -1),
            )
            .returning(articles_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_article(row._asdict())

    @store_call
    async def increment_counters(
        self,
        article_id: ArticleId,
        comments_delta: int = 0,
        replies_delta: int = 0,
        upsert: bool = False,
    ) -> Optional[Article]:
        """Adjust comments_count/replies_count in one statement."""
        if upsert:
            stmt = (
                insert(articles_table)
                .values(
                    article_id=article_id,
                    likes=[],
                    likes_count=0,
                    comments_count=max(comments_delta, 0),
                    replies_count=max(replies_delta, 0),
                )
                .on_conflict_do_update(
                    index_elements=[articles_table.c.article_id],
                    set_={
                        "comments_count": _clamped(
                            articles_table.c.comments_count, comments_delta
                        ),
                        "replies_count": _clamped(
                            articles_table.c.replies_count, replies_delta
                        ),
                    },
                )
                .returning(articles_table)
            )
        else:
            stmt = (
                update(articles_table)
                .where(articles_table.c.article_id == article_id)
                .values(
                    comments_count=_clamped(
                        articles_table.c.comments_count, comments_delta
                    ),
                    replies_count=_clamped(articles_table.c.replies_count, replies_delta),
                )
                .returning(articles_table)
            )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_article(row._asdict())

    @store_call
    async def save(self, article: Article) -> Article:
        """Save an article (create or replace by article_id)."""
        article_dict = article_to_dict(article)
        replaced = {k: v for k, v in article_dict.items() if k not in ("id", "article_id")}
        stmt = (
            insert(articles_table)
            .values(**article_dict)
            .on_conflict_do_update(
                index_elements=[articles_table.c.article_id],
                set_=replaced,
            )
            .returning(articles_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_article(row._asdict()) if row else article
