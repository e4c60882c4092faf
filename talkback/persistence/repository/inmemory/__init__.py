"""In-memory repository implementations for testing."""

from .article import InMemoryArticleRepository
from .comment import InMemoryCommentRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCommentRepository",
]
