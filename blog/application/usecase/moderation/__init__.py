"""Comment moderation use cases."""

from .get_unread_comments import (
    GetUnreadCommentsRequest,
    GetUnreadCommentsResponse,
    GetUnreadCommentsUseCase,
    UnreadArticle,
    UnreadCommentItem,
)
from .get_unread_count import (
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
)
from .mark_comment_read import (
    MarkCommentReadRequest,
    MarkCommentReadResponse,
    MarkCommentReadUseCase,
)

__all__ = [
    "GetUnreadCommentsRequest",
    "GetUnreadCommentsResponse",
    "GetUnreadCommentsUseCase",
    "GetUnreadCountRequest",
    "GetUnreadCountResponse",
    "GetUnreadCountUseCase",
    "MarkCommentReadRequest",
    "MarkCommentReadResponse",
    "MarkCommentReadUseCase",
    "UnreadArticle",
    "UnreadCommentItem",
]
