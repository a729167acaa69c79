"""Domain services."""

from .article_service import ArticleService
from .base import Service
from .comment_service import CommentService
from .comment_tree import (
    MAX_COMMENT_DEPTH,
    CommentNode,
    CommentTreeBuilder,
    DepthCheck,
    count_nodes,
)
from .jwt_service import JWTService
from .user_service import UserService

__all__ = [
    "ArticleService",
    "CommentNode",
    "CommentService",
    "CommentTreeBuilder",
    "DepthCheck",
    "JWTService",
    "MAX_COMMENT_DEPTH",
    "Service",
    "UserService",
    "count_nodes",
]
