"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from talkback.application.usecase.article import ArticleItem
from talkback.application.usecase.comment import (
    CommentItem,
    CommentLikeRequest,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetCommentUseCase,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from talkback.domain.error import (
    AlreadyLikedError,
    DeletionFailedError,
    NotFoundError,
    NotLikedError,
    ValidationError,
)
from talkback.domain.value import AuthorSnapshot

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    article_id: str = Field(min_length=1)
    comment_body: str = Field(min_length=1, max_length=10000)
    parent: str | None = None  # Parent comment ID for replies
    author: AuthorSnapshot


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    comment_id: str = Field(min_length=1)
    update: str = Field(min_length=1, max_length=10000)


class CommentIdAPIRequest(BaseModel):
    """API request addressing a single comment."""

    comment_id: str = Field(min_length=1)


class CommentLikeAPIRequest(BaseModel):
    """API request for liking or unliking a comment."""

    comment_id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)


@router.get("", response_model=list[CommentItem])
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    article_id: str = Query(min_length=1),
    sort_by: str | None = None,
    parent: str | None = None,
    page: str | None = None,
    limit: str | None = None,
) -> list[CommentItem]:
    """List one page of an article's comments.

    Args:
        get_comments_use_case: Get comments use case from DI
        article_id: External article ID
        sort_by: popular, newest or oldest; anything else keeps store order
        parent: Omit for every comment, empty/"null"/"root" for root
            comments, or a comment ID for its direct replies
        page: 1-based page number (default 1)
        limit: Page size (default 5)

    Returns:
        Comments of the requested page

    Raises:
        HTTPException: 400 on malformed page, limit or parent
    """
    try:
        result = await get_comments_use_case.execute(
            GetCommentsRequest(
                article_id=article_id,
                parent=parent,
                sort_by=sort_by,
                page=page,
                limit=limit,
            )
        )
        return result.comments
    except ValidationError as e:
        logfire.warn("Invalid comment listing request", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error listing comments", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list comments",
        )


@router.get("/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentItem:
    """Get a single comment.

    Raises:
        HTTPException: 400 on a malformed ID, 404 if not found
    """
    try:
        return await get_comment_use_case.execute(
            GetCommentRequest(comment_id=comment_id)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error loading comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load comment",
        )


@router.post("", response_model=CommentItem)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentItem:
    """Create a comment on an article or reply to another comment.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment

    Raises:
        HTTPException: 404 if the parent is missing, 400 if it is malformed
            or belongs to another article
    """
    try:
        use_case_request = CreateCommentRequest(
            article_id=request.article_id,
            body=request.comment_body,
            author=request.author,
            parent=request.parent or None,
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed - parent not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (ValidationError, ValueError) as e:
        logfire.warn("Comment creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


@router.delete("", response_model=ArticleItem)
async def delete_comment(
    request: CommentIdAPIRequest,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> ArticleItem:
    """Delete a comment together with every reply below it.

    Returns:
        The owning article with updated counters

    Raises:
        HTTPException: 404 if the comment or article is missing, 500 if the
            subtree changed while being deleted
    """
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=request.comment_id)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        logfire.warn("Delete of unknown comment", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DeletionFailedError as e:
        logfire.error("Comment subtree deletion failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
    except Exception as e:
        logfire.error("Unexpected error deleting comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment",
        )


@router.patch("", response_model=CommentItem)
async def update_comment(
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> CommentItem:
    """Replace a comment's body.

    Raises:
        HTTPException: 400 on a malformed ID, 404 if not found
    """
    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(comment_id=request.comment_id, body=request.update)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        logfire.warn("Update of unknown comment", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error updating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update comment",
        )


@router.post("/like", response_model=CommentItem)
async def like_comment(
    request: CommentLikeAPIRequest,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
) -> CommentItem:
    """Like a comment.

    Raises:
        HTTPException: 404 if the comment is missing, 409 if already liked
    """
    try:
        return await like_comment_use_case.execute(
            CommentLikeRequest(comment_id=request.comment_id, user_id=request.user_id)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AlreadyLikedError as e:
        logfire.warn("Duplicate comment like", error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error liking comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to like comment",
        )


@router.post("/unlike", response_model=CommentItem)
async def unlike_comment(
    request: CommentLikeAPIRequest,
    unlike_comment_use_case: FromDishka[UnlikeCommentUseCase],
) -> CommentItem:
    """Withdraw a like from a comment.

    Raises:
        HTTPException: 404 if the comment is missing, 409 if not liked
    """
    try:
        return await unlike_comment_use_case.execute(
            CommentLikeRequest(comment_id=request.comment_id, user_id=request.user_id)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotLikedError as e:
        logfire.warn("Unlike without like", error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error unliking comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to unlike comment",
        )
