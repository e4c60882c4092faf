"""PostgreSQL repository implementations."""

from talkback.persistence.repository.article import PostgresArticleRepository
from talkback.persistence.repository.comment import PostgresCommentRepository

__all__ = [
    "PostgresArticleRepository",
    "PostgresCommentRepository",
]
