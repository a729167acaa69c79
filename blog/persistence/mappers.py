"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from blog.domain.model import Article, Comment, User
from blog.domain.value import ArticleId, ArticleStatus, CommentId, Slug, UserId, UserRole


def _uuid(value: Any) -> UUID | None:
    """Normalize a UUID column value (drivers may hand back strings)."""
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    author_user_id = _uuid(row.get("author_user_id"))
    parent_id = _uuid(row.get("parent_id"))
    read_by = _uuid(row.get("read_by"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        article_id=ArticleId(_uuid(row["article_id"])),
        content=row["content"],
        author_user_id=UserId(author_user_id) if author_user_id else None,
        author_name=row.get("author_name"),
        parent_id=CommentId(parent_id) if parent_id else None,
        created_at=row["created_at"],
        is_read=row.get("is_read", False),
        read_at=row.get("read_at"),
        read_by=UserId(read_by) if read_by else None,
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump()


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model.

    Args:
        row: Database row as dict

    Returns:
        Article domain model
    """
    author_id = _uuid(row.get("author_id"))
    return Article(
        id=ArticleId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        status=ArticleStatus(row["status"]),
        author_id=UserId(author_id) if author_id else None,
        created_at=row["created_at"],
        published_at=row.get("published_at"),
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict.

    Args:
        article: Article domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = article.model_dump()
    data["status"] = article.status.value
    return data


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        name=row.get("name"),
        image=row.get("image"),
        role=UserRole(row["role"]),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data
