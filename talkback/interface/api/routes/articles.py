"""Article routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Response, status
from pydantic import BaseModel, Field

from talkback.application.usecase.article import (
    ArticleItem,
    GetArticleRequest,
    GetArticleUseCase,
    LikeArticleRequest,
    LikeArticleUseCase,
    ReconcileArticleRequest,
    ReconcileArticleResponse,
    ReconcileArticleUseCase,
    UnlikeArticleRequest,
    UnlikeArticleUseCase,
)
from talkback.domain.error import (
    AlreadyLikedError,
    NotFoundError,
    NotLikedError,
    ValidationError,
)

router = APIRouter(prefix="/articles", tags=["articles"], route_class=DishkaRoute)


class ArticleLikeAPIRequest(BaseModel):
    """API request for liking or unliking an article."""

    article_id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)


class ReconcileArticleAPIRequest(BaseModel):
    """API request for reconciling an article's counters."""

    article_id: str = Field(min_length=1)


async def _get_article(article_id: str, use_case: GetArticleUseCase):
    try:
        result = await use_case.execute(GetArticleRequest(article_id=article_id))
    except Exception as e:
        logfire.error("Failed to load article", article_id=article_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load article",
        )

    if result.article is None:
        # Nobody has liked or commented on it yet
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return result.article


@router.get("", response_model=ArticleItem)
async def get_article(
    get_article_use_case: FromDishka[GetArticleUseCase],
    article_id: str = Query(min_length=1),
):
    """Get the like/comment aggregate of an article.

    Args:
        get_article_use_case: Get article use case from DI
        article_id: External article ID

    Returns:
        The aggregate, or 204 when the article has no activity yet
    """
    return await _get_article(article_id, get_article_use_case)


@router.get("/{article_id}", response_model=ArticleItem)
async def get_article_by_path(
    article_id: str,
    get_article_use_case: FromDishka[GetArticleUseCase],
):
    """Get the like/comment aggregate of an article addressed by path."""
    return await _get_article(article_id, get_article_use_case)


@router.post("/like", response_model=ArticleItem)
async def like_article(
    request: ArticleLikeAPIRequest,
    like_article_use_case: FromDishka[LikeArticleUseCase],
) -> ArticleItem:
    """Like an article, creating its aggregate on the first like.

    Args:
        request: Article and liking user
        like_article_use_case: Like article use case from DI

    Returns:
        The article after the like

    Raises:
        HTTPException: 409 if already liked
    """
    try:
        return await like_article_use_case.execute(
            LikeArticleRequest(article_id=request.article_id, user_id=request.user_id)
        )
    except AlreadyLikedError as e:
        logfire.warn("Duplicate article like", error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error liking article", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to like article",
        )


@router.post("/unlike", response_model=ArticleItem)
async def unlike_article(
    request: ArticleLikeAPIRequest,
    unlike_article_use_case: FromDishka[UnlikeArticleUseCase],
) -> ArticleItem:
    """Withdraw a like from an article.

    Raises:
        HTTPException: 404 if the article does not exist, 409 if not liked
    """
    try:
        return await unlike_article_use_case.execute(
            UnlikeArticleRequest(article_id=request.article_id, user_id=request.user_id)
        )
    except NotFoundError as e:
        logfire.warn("Unlike of unknown article", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotLikedError as e:
        logfire.warn("Unlike without like", error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error unliking article", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to unlike article",
        )


@router.post("/reconcile", response_model=ReconcileArticleResponse)
async def reconcile_article(
    request: ReconcileArticleAPIRequest,
    reconcile_article_use_case: FromDishka[ReconcileArticleUseCase],
) -> ReconcileArticleResponse:
    """Recompute every denormalized counter of an article from its comments.

    Raises:
        HTTPException: 404 if the article has neither aggregate nor comments
    """
    try:
        return await reconcile_article_use_case.execute(
            ReconcileArticleRequest(article_id=request.article_id)
        )
    except NotFoundError as e:
        logfire.warn("Reconcile of unknown article", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error reconciling article", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to reconcile article",
        )
