"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import asc, delete, desc, func, literal, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.types import Text

from talkback.domain.model import Comment
from talkback.domain.repository import CommentRepository, ParentFilter
from talkback.domain.value import (
    ArticleId,
    CommentId,
    CommentSortOrder,
    ParentScope,
    UserId,
)
from talkback.persistence.database import store_call
from talkback.persistence.mappers import comment_to_dict, row_to_comment
from talkback.persistence.tables import comments_table

_SORT_ORDER = {
    CommentSortOrder.POPULAR: (
        desc(comments_table.c.likes_count),
        desc(comments_table.c.created_at),
    ),
    CommentSortOrder.NEWEST: (desc(comments_table.c.created_at),),
    CommentSortOrder.OLDEST: (asc(comments_table.c.created_at),),
}


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_one(self, stmt) -> Optional[Comment]:
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    @store_call
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    @store_call
    async def find_by_article(
        self,
        article_id: ArticleId,
        parent: ParentFilter = ParentScope.ANY,
        sort: Optional[CommentSortOrder] = None,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Comment]:
        """Find a page of comments for an article."""
        stmt = select(comments_table).where(comments_table.c.article_id == article_id)

        if parent is ParentScope.ROOT:
            stmt = stmt.where(comments_table.c.parent.is_(None))
        elif parent is not ParentScope.ANY:
            stmt = stmt.where(comments_table.c.parent == parent)

        # Insertion order breaks ties and stands in when no sort is asked for
        order = _SORT_ORDER.get(sort, ())
        stmt = stmt.order_by(*order, comments_table.c.seq).limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @store_call
    async def find_all_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find every comment of an article in insertion order."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.article_id == article_id)
            .order_by(comments_table.c.seq)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @store_call
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct child comments of a parent comment."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent == parent_id)
            .order_by(comments_table.c.seq)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @store_call
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or replace)."""
        comment_dict = comment_to_dict(comment)
        replaced = {k: v for k, v in comment_dict.items() if k != "id"}
        stmt = (
            insert(comments_table)
            .values(**comment_dict)
            .on_conflict_do_update(index_elements=[comments_table.c.id], set_=replaced)
            .returning(comments_table)
        )
        return await self._fetch_one(stmt) or comment

    @store_call
    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a single comment (hard delete)."""
        stmt = (
            delete(comments_table)
            .where(comments_table.c.id == comment_id)
            .returning(comments_table)
        )
        return await self._fetch_one(stmt)

    @store_call
    async def increment_replies_count(
        self, comment_id: CommentId, delta: int
    ) -> Optional[Comment]:
        """Atomically adjust replies_count (never below 0)."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(replies_count=func.greatest(comments_table.c.replies_count + delta, 0))
            .returning(comments_table)
        )
        return await self._fetch_one(stmt)

    @store_call
    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Update the body of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(body=body)
            .returning(comments_table)
        )
        return await self._fetch_one(stmt)

    @store_call
    async def add_like(self, comment_id: CommentId, user_id: UserId) -> Optional[Comment]:
        """Append user_id to likes unless already present."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(~comments_table.c.likes.any(user_id))
            .values(
                likes=func.array_append(comments_table.c.likes, literal(user_id, Text)),
                likes_count=comments_table.c.likes_count + 1,
            )
            .returning(comments_table)
        )
        return await self._fetch_one(stmt)

    @store_call
    async def remove_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Comment]:
        """Pull user_id from likes only if present."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.likes.any(user_id))
            .values(
                likes=func.array_remove(comments_table.c.likes, literal(user_id, Text)),
                likes_count=func.greatest(comments_table.c.likes_count - 1, 0),
            )
            .returning(comments_table)
        )
        return await self._fetch_one(stmt)
