"""Domain model entities for Talkback."""

from talkback.domain.model.article import Article
from talkback.domain.model.comment import Comment

__all__ = [
    "Article",
    "Comment",
]
