"""Test configuration and helpers."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from talkback.domain.model import Comment
from talkback.domain.value import ArticleId, AuthorSnapshot, CommentId, UserId


def make_author(name: str = "Ada") -> AuthorSnapshot:
    """Build an author snapshot with a unique ID."""
    return AuthorSnapshot(id=f"user-{uuid4().hex[:8]}", name=name, image=None)


def make_comment(
    article_id: str,
    parent: CommentId | None = None,
    body: str = "A comment",
    likes: list[str] | None = None,
    replies_count: int = 0,
    created_at: datetime | None = None,
) -> Comment:
    """Build a comment directly, bypassing the service's counter updates."""
    likes = likes or []
    return Comment(
        id=CommentId(uuid4()),
        article_id=ArticleId(article_id),
        body=body,
        parent=parent,
        likes=[UserId(u) for u in likes],
        likes_count=len(likes),
        replies_count=replies_count,
        created_at=created_at or datetime.now(timezone.utc),
        author=make_author(),
    )


def minutes_ago(minutes: int) -> datetime:
    """Timestamp `minutes` before now, in UTC."""
    return datetime.now(timezone.utc) - timedelta(minutes=minutes)


# Spans and events go nowhere during tests
logfire.configure(send_to_logfire=False, console=False)
