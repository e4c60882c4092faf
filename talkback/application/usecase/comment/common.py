"""Shared pieces of the comment use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from talkback.domain.error import ValidationError
from talkback.domain.model import Comment
from talkback.domain.value import CommentId


class AuthorItem(BaseModel):
    """Author snapshot in response."""

    id: str
    name: str
    image: str | None


class CommentItem(BaseModel):
    """Comment item in response."""

    id: str
    article_id: str
    body: str
    parent: str | None
    likes: list[str]
    likes_count: int
    replies_count: int
    created_at: datetime
    author: AuthorItem


def to_comment_item(comment: Comment) -> CommentItem:
    """Build the response item for a comment."""
    return CommentItem(
        id=str(comment.id),
        article_id=comment.article_id,
        body=comment.body,
        parent=str(comment.parent) if comment.parent else None,
        likes=list(comment.likes),
        likes_count=comment.likes_count,
        replies_count=comment.replies_count,
        created_at=comment.created_at,
        author=AuthorItem(
            id=comment.author.id,
            name=comment.author.name,
            image=comment.author.image,
        ),
    )


def parse_comment_id(raw: str, field: str = "comment_id") -> CommentId:
    """Parse a client supplied comment ID.

    Raises:
        ValidationError: If raw is not a UUID
    """
    try:
        return CommentId(UUID(raw))
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid request: '{field}' is not a valid comment id")
