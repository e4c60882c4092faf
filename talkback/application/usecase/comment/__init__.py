"""Comment use cases."""

from .common import AuthorItem, CommentItem
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_comment import GetCommentRequest, GetCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .like_comment import CommentLikeRequest, LikeCommentUseCase, UnlikeCommentUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "AuthorItem",
    "CommentItem",
    "CommentLikeRequest",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "LikeCommentUseCase",
    "UnlikeCommentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
