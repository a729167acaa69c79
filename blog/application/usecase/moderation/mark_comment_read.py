"""Mark comment read use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import AdminUseCase
from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId, UserRole


class MarkCommentReadRequest(BaseModel):
    """Mark comment read request."""

    comment_id: str
    user_id: str
    role: UserRole


class MarkCommentReadResponse(BaseModel):
    """Mark comment read response."""

    id: str
    is_read: bool
    read_at: datetime | None
    read_by: str | None
    marked_count: int


class MarkCommentReadUseCase(AdminUseCase):
    """Use case for marking a comment, and the rest of its thread, as read."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize mark comment read use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: MarkCommentReadRequest) -> MarkCommentReadResponse:
        """Execute mark read flow.

        All unread comments on the same article are marked, except the
        admin's own. The admin's own comment is never unread to them, so
        ``is_read`` may stay false when they open one of theirs.

        Raises:
            NotAuthorizedError: If the caller is not an administrator
            CommentNotFoundError: If the comment does not exist
        """
        self.require_admin(request.user_id, request.role, "moderate", "comments")

        comment, marked = await self.comment_service.mark_article_read(
            comment_id=CommentId(UUID(request.comment_id)),
            reader_id=UserId(UUID(request.user_id)),
        )

        return MarkCommentReadResponse(
            id=str(comment.id),
            is_read=comment.is_read,
            read_at=comment.read_at,
            read_by=str(comment.read_by) if comment.read_by else None,
            marked_count=marked,
        )
