"""Domain value objects for the blog."""

from blog.domain.value.identifiers import ArticleId, CommentId, UserId
from blog.domain.value.types import ArticleStatus, Slug, UserRole

__all__ = [
    # Identifiers
    "UserId",
    "ArticleId",
    "CommentId",
    # Types
    "ArticleStatus",
    "Slug",
    "UserRole",
]
