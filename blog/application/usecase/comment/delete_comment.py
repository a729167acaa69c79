"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import AdminUseCase
from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserRole


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str
    role: UserRole


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: int  # Comment itself plus every reply beneath it


class DeleteCommentUseCase(AdminUseCase):
    """Use case for removing a comment thread. Admins only."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Delete the comment and all of its replies.

        Raises:
            NotAuthorizedError: If the caller is not an administrator
            CommentNotFoundError: If the comment does not exist
        """
        self.require_admin(request.user_id, request.role, "delete", "comments")

        comment_id = CommentId(UUID(request.comment_id))
        deleted = await self.comment_service.delete_comment(comment_id)

        return DeleteCommentResponse(comment_id=request.comment_id, deleted=deleted)
