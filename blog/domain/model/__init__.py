"""Domain model entities for the blog."""

from blog.domain.model.article import Article
from blog.domain.model.comment import Comment
from blog.domain.model.user import User

__all__ = [
    "Article",
    "Comment",
    "User",
]
