"""Article use cases."""

from .common import ArticleItem
from .get_article import GetArticleRequest, GetArticleResponse, GetArticleUseCase
from .like_article import LikeArticleRequest, LikeArticleUseCase
from .reconcile_article import (
    ReconcileArticleRequest,
    ReconcileArticleResponse,
    ReconcileArticleUseCase,
)
from .unlike_article import UnlikeArticleRequest, UnlikeArticleUseCase

__all__ = [
    "ArticleItem",
    "GetArticleRequest",
    "GetArticleResponse",
    "GetArticleUseCase",
    "LikeArticleRequest",
    "LikeArticleUseCase",
    "ReconcileArticleRequest",
    "ReconcileArticleResponse",
    "ReconcileArticleUseCase",
    "UnlikeArticleRequest",
    "UnlikeArticleUseCase",
]
