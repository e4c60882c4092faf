"""Domain value objects for Talkback."""

from talkback.domain.value.identifiers import ArticleId, CommentId, UserId
from talkback.domain.value.types import (
    AuthorSnapshot,
    CommentSortOrder,
    Pagination,
    ParentScope,
)

__all__ = [
    # Identifiers
    "ArticleId",
    "CommentId",
    "UserId",
    # Types
    "AuthorSnapshot",
    "CommentSortOrder",
    "Pagination",
    "ParentScope",
]
