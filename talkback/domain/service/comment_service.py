"""Comment domain service."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

import logfire

from talkback.config import CommentSettings
from talkback.domain.error import (
    DeletionFailedError,
    NotFoundError,
    ParentNotFoundError,
    ValidationError,
)
from talkback.domain.model import Article, Comment
from talkback.domain.repository import CommentRepository, ParentFilter
from talkback.domain.value import (
    ArticleId,
    AuthorSnapshot,
    CommentId,
    CommentSortOrder,
    Pagination,
    ParentScope,
)

from .article_service import ArticleService
from .base import Service


@dataclass
class SubtreeDeletion:
    """Running totals of a subtree delete."""

    roots_deleted: int = 0
    replies_deleted: int = 0

    @property
    def total(self) -> int:
        return self.roots_deleted + self.replies_deleted


class CommentService(Service):
    """Domain service for the comment tree.

    Keeps three denormalized counters in step with the tree:
    - Comment.replies_count: direct children of the comment
    - Article.comments_count: root comments of the article
    - Article.replies_count: replies at any depth
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        article_service: ArticleService,
        settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            article_service: Article aggregate service
            settings: Comment tree settings
        """
        self.comment_repository = comment_repository
        self.article_service = article_service
        self.settings = settings

    async def create_comment(
        self,
        article_id: ArticleId,
        body: str,
        author: AuthorSnapshot,
        parent: CommentId | None = None,
    ) -> Comment:
        """Create a comment on an article or a reply to another comment.

        Args:
            article_id: External article ID
            body: Comment text
            author: Author snapshot stored with the comment
            parent: Parent comment ID for replies (None for root comments)

        Returns:
            Created comment

        Raises:
            ParentNotFoundError: If the parent does not exist (strict mode)
            ValidationError: If the parent belongs to another article (strict mode)
        """
        with logfire.span(
            "comment_service.create_comment",
            article_id=article_id,
            author_id=author.id,
            parent=str(parent) if parent else None,
        ):
            if parent and self.settings.require_existing_parent:
                await self._check_parent(article_id, parent)

            comment = Comment(
                id=CommentId(uuid4()),
                article_id=article_id,
                body=body,
                parent=parent,
                likes=[],
                likes_count=0,
                replies_count=0,
                created_at=datetime.now(timezone.utc),
                author=author,
            )
            saved = await self.comment_repository.save(comment)

            if parent:
                updated_parent = await self.comment_repository.increment_replies_count(
                    parent, 1
                )
                if updated_parent is None:
                    logfire.warn(
                        "Reply created under missing parent",
                        comment_id=str(saved.id),
                        parent=str(parent),
                    )

            await self.article_service.record_comment_created(
                article_id, is_reply=parent is not None
            )

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                article_id=article_id,
                is_reply=parent is not None,
            )
            return saved

    async def _check_parent(self, article_id: ArticleId, parent_id: CommentId) -> None:
        parent = await self.comment_repository.find_by_id(parent_id)
        if not parent:
            logfire.warn(
                "Parent comment not found",
                parent=str(parent_id),
                article_id=article_id,
            )
            raise ParentNotFoundError(str(parent_id))
        if parent.article_id != article_id:
            logfire.warn(
                "Parent comment does not belong to article",
                parent=str(parent_id),
                parent_article_id=parent.article_id,
                target_article_id=article_id,
            )
            raise ValidationError("Parent comment does not belong to this article")

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def list_comments(
        self,
        article_id: ArticleId,
        pagination: Pagination,
        parent: ParentFilter = ParentScope.ANY,
        sort: CommentSortOrder | None = None,
    ) -> list[Comment]:
        """List one page of an article's comments.

        Args:
            article_id: External article ID
            pagination: Validated page/limit
            parent: ParentScope.ANY, ParentScope.ROOT or a parent comment ID
            sort: Sort order, None keeps store order

        Returns:
            At most pagination.limit comments
        """
        with logfire.span(
            "comment_service.list_comments",
            article_id=article_id,
            parent=str(parent.value if isinstance(parent, ParentScope) else parent),
            sort=sort.value if sort else None,
            page=pagination.page,
            limit=pagination.limit,
        ):
            comments = await self.comment_repository.find_by_article(
                article_id,
                parent=parent,
                sort=sort,
                limit=pagination.limit,
                offset=pagination.offset,
            )
            logfire.info(
                "Comments listed", article_id=article_id, count=len(comments)
            )
            return comments

    async def delete_comment(self, comment_id: CommentId) -> Article:
        """Delete a comment together with every reply below it.

        The subtree is walked with an explicit stack, so thread depth is
        not bounded by the interpreter's recursion limit. A node is deleted
        before its children are looked up; the lookup goes by the node's ID,
        which stays valid after the document is gone.

        Args:
            comment_id: Root of the subtree to delete

        Returns:
            The owning article with its counters reduced

        Raises:
            NotFoundError: If the comment or its article does not exist
            DeletionFailedError: If a node disappeared mid-walk
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            target = await self.comment_repository.find_by_id(comment_id)
            if not target:
                logfire.warn("Delete of non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            deletion = await self._delete_subtree(target.id)

            if target.parent:
                await self.comment_repository.increment_replies_count(target.parent, -1)

            article = await self.article_service.record_comments_deleted(
                target.article_id,
                roots_deleted=deletion.roots_deleted,
                replies_deleted=deletion.replies_deleted,
            )

            logfire.info(
                "Comment subtree deleted",
                comment_id=str(comment_id),
                article_id=target.article_id,
                roots_deleted=deletion.roots_deleted,
                replies_deleted=deletion.replies_deleted,
            )
            return article

    async def _delete_subtree(self, root_id: CommentId) -> SubtreeDeletion:
        deletion = SubtreeDeletion()
        pending: list[CommentId] = [root_id]

        while pending:
            node_id = pending.pop()
            deleted = await self.comment_repository.delete(node_id)
            if deleted is None:
                logfire.error(
                    "Comment vanished during subtree delete",
                    comment_id=str(node_id),
                    deleted_so_far=deletion.total,
                )
                raise DeletionFailedError(str(node_id))

            if deleted.is_root:
                deletion.roots_deleted += 1
            else:
                deletion.replies_deleted += 1

            children = await self.comment_repository.find_children(deleted.id)
            pending.extend(child.id for child in children)

        return deletion

    async def update_body(self, comment_id: CommentId, body: str) -> Comment:
        """Replace the body of a comment.

        Args:
            comment_id: Comment ID
            body: New text content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.update_body",
            comment_id=str(comment_id),
            body_length=len(body),
        ):
            updated = await self.comment_repository.update_body(comment_id, body)

            if updated is None:
                logfire.warn(
                    "Comment not found for body update", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment body updated",
                comment_id=str(comment_id),
                article_id=updated.article_id,
                body_length=len(updated.body),
            )
            return updated
