"""Comment entity.

Comments form a forest per article: root comments have no parent, replies
point at their direct parent. Counters on a comment only cover its direct
children, subtree-wide totals live on the Article aggregate.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from talkback.domain.model.common import DomainModel
from talkback.domain.value import ArticleId, AuthorSnapshot, CommentId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on an article or a reply to another comment.
    Nesting depth is unlimited.
    """

    id: CommentId
    article_id: ArticleId
    body: str = Field(min_length=1, max_length=10000)
    parent: Optional[CommentId] = None
    likes: list[UserId] = Field(default_factory=list)
    likes_count: int = Field(default=0, ge=0)
    replies_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    author: AuthorSnapshot

    @property
    def is_root(self) -> bool:
        """Whether this comment hangs directly off the article."""
        return self.parent is None

    def is_liked_by(self, user_id: UserId) -> bool:
        """Whether user_id is in the likes set."""
        return user_id in self.likes
