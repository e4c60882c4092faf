"""Domain services."""

from .article_service import ArticleService
from .base import Service
from .comment_service import CommentService, SubtreeDeletion
from .like_service import LikeService
from .reconciliation_service import ReconciliationReport, ReconciliationService

__all__ = [
    "ArticleService",
    "CommentService",
    "LikeService",
    "ReconciliationReport",
    "ReconciliationService",
    "Service",
    "SubtreeDeletion",
]
