"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from talkback.domain.model import Article, Comment
from talkback.domain.value import ArticleId, AuthorSnapshot, CommentId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model.

    Args:
        row: Database row as dict

    Returns:
        Article domain model
    """
    return Article(
        id=_uuid(row["id"]),
        article_id=ArticleId(row["article_id"]),
        likes=[UserId(user_id) for user_id in row["likes"] or []],
        likes_count=row["likes_count"],
        comments_count=row["comments_count"],
        replies_count=row["replies_count"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict.

    Args:
        article: Article domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return article.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        article_id=ArticleId(row["article_id"]),
        body=row["body"],
        parent=CommentId(_uuid(row["parent"])) if row.get("parent") else None,
        likes=[UserId(user_id) for user_id in row["likes"] or []],
        likes_count=row["likes_count"],
        replies_count=row["replies_count"],
        created_at=row["created_at"],
        author=AuthorSnapshot(
            id=row["author_id"],
            name=row["author_name"],
            image=row.get("author_image"),
        ),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    The author snapshot is flattened into author_* columns.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump(exclude={"author"})
    data["author_id"] = comment.author.id
    data["author_name"] = comment.author.name
    data["author_image"] = comment.author.image
    return data
