"""In-memory comment repository for testing."""

from typing import Optional

from talkback.domain.model.comment import Comment
from talkback.domain.repository.comment import CommentRepository, ParentFilter
from talkback.domain.value import (
    ArticleId,
    CommentId,
    CommentSortOrder,
    ParentScope,
    UserId,
)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Dict order doubles as insertion order.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_article(
        self,
        article_id: ArticleId,
        parent: ParentFilter = ParentScope.ANY,
        sort: Optional[CommentSortOrder] = None,
        limit: int = 5,
        offset: int = 0,
    ) -> list[Comment]:
        """Find a page of comments for an article."""
        comments = [c for c in self._comments.values() if c.article_id == article_id]

        if parent is ParentScope.ROOT:
            comments = [c for c in comments if c.parent is None]
        elif parent is not ParentScope.ANY:
            comments = [c for c in comments if c.parent == parent]

        # Stable sorts, ties keep insertion order
        if sort is CommentSortOrder.POPULAR:
            comments.sort(key=lambda c: (c.likes_count, c.created_at), reverse=True)
        elif sort is CommentSortOrder.NEWEST:
            comments.sort(key=lambda c: c.created_at, reverse=True)
        elif sort is CommentSortOrder.OLDEST:
            comments.sort(key=lambda c: c.created_at)

        # Paginate
        return comments[offset : offset + limit]

    async def find_all_by_article(self, article_id: ArticleId) -> list[Comment]:
        """Find every comment of an article."""
        return [c for c in self._comments.values() if c.article_id == article_id]

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct children of a comment."""
        return [c for c in self._comments.values() if c.parent == parent_id]

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a comment."""
        return self._comments.pop(comment_id, None)

    async def increment_replies_count(
        self, comment_id: CommentId, delta: int
    ) -> Optional[Comment]:
        """Adjust replies_count (never below 0)."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        # Comments are immutable, store an updated copy
        comment = comment.model_copy(
            update={"replies_count": max(comment.replies_count + delta, 0)}
        )
        self._comments[comment_id] = comment
        return comment

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Update the body of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        comment = comment.model_copy(update={"body": body})
        self._comments[comment_id] = comment
        return comment

    async def add_like(self, comment_id: CommentId, user_id: UserId) -> Optional[Comment]:
        """Add a like unless already present."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_liked_by(user_id):
            return None

        comment = comment.model_copy(
            update={
                "likes": [*comment.likes, user_id],
                "likes_count": comment.likes_count + 1,
            }
        )
        self._comments[comment_id] = comment
        return comment

    async def remove_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Comment]:
        """Remove a like if present."""
        comment = self._comments.get(comment_id)
        if comment is None or not comment.is_liked_by(user_id):
            return None

        comment = comment.model_copy(
            update={
                "likes": [u for u in comment.likes if u != user_id],
                "likes_count": max(comment.likes_count - 1, 0),
            }
        )
        self._comments[comment_id] = comment
        return comment
