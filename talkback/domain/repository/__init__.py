"""Repository interfaces for Talkback domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from talkback.domain.repository.article import ArticleRepository
from talkback.domain.repository.comment import CommentRepository, ParentFilter

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "ParentFilter",
]
