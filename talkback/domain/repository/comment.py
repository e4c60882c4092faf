"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from talkback.domain.model.comment import Comment
from talkback.domain.value import (
    ArticleId,
    CommentId,
    CommentSortOrder,
    ParentScope,
    UserId,
)

ParentFilter = Union[CommentId, ParentScope]


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_article(
        self,
        article_id: ArticleId,
        parent: ParentFilter = ParentScope.ANY,
        sort: Optional[CommentSortOrder] = None,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Comment]:
        """Find a page of comments for an article.

        Args:
            article_id: The owning article
            parent: ParentScope.ANY for every comment, ParentScope.ROOT for
                root comments only, or a comment ID for its direct replies
            sort: Sort order, None keeps insertion order
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def find_all_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find every comment of an article, unpaginated.

        Args:
            article_id: The owning article

        Returns:
            List of comments in insertion order
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct child comments of a parent comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            List of child comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or replace).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a single comment (hard delete, children untouched).

        Args:
            comment_id: The comment ID to delete

        Returns:
            The deleted comment, or None if it did not exist
        """
        pass

    @abstractmethod
    async def increment_replies_count(
        self, comment_id: CommentId, delta: int
    ) -> Optional[Comment]:
        """Atomically adjust the direct-reply counter.

        Args:
            comment_id: Comment ID
            delta: Change to apply (may be negative)

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace the body of a comment.

        Args:
            comment_id: Comment ID
            body: New body

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def add_like(self, comment_id: CommentId, user_id: UserId) -> Optional[Comment]:
        """Increment likes_count and append user_id, unless already liked.

        Args:
            comment_id: Comment ID
            user_id: Liking user

        Returns:
            The updated comment, or None if missing or already liked
        """
        pass

    @abstractmethod
    async def remove_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Comment]:
        """Decrement likes_count and pull user_id, only if liked.

        Args:
            comment_id: Comment ID
            user_id: Unliking user

        Returns:
            The updated comment, or None if missing or not liked
        """
        pass
