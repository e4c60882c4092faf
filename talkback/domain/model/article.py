"""Article aggregate.

Articles live in the embedding site. Talkback only keeps an aggregate per
external article id, created the first time somebody likes or comments on it.
"""

from uuid import UUID, uuid4

from pydantic import Field

from talkback.domain.model.common import DomainModel
from talkback.domain.value import ArticleId, UserId


class Article(DomainModel):
    """Per-article aggregate of likes and comment counters.

    Counters are denormalized:
    - likes_count: len(likes)
    - comments_count: number of root comments of the article
    - replies_count: number of replies at any depth
    """

    id: UUID = Field(default_factory=uuid4)  # Storage key, never exposed as article_id
    article_id: ArticleId
    likes: list[UserId] = Field(default_factory=list)
    likes_count: int = Field(default=0, ge=0)
    comments_count: int = Field(default=0, ge=0)
    replies_count: int = Field(default=0, ge=0)

    def is_liked_by(self, user_id: UserId) -> bool:
        """Whether user_id is in the likes set."""
        return user_id in self.likes
