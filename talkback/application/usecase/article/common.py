"""Article response item shared by article use cases."""

from pydantic import BaseModel

from talkback.domain.model import Article


class ArticleItem(BaseModel):
    """Article aggregate as returned to clients."""

    article_id: str
    likes: list[str]
    likes_count: int
    comments_count: int
    replies_count: int


def to_article_item(article: Article) -> ArticleItem:
    """Build the response item for an article."""
    return ArticleItem(
        article_id=article.article_id,
        likes=list(article.likes),
        likes_count=article.likes_count,
        comments_count=article.comments_count,
        replies_count=article.replies_count,
    )
