"""Get unread comment count use case."""

from pydantic import BaseModel

from blog.application.usecase.base import AdminUseCase
from blog.domain.service import CommentService
from blog.domain.value import UserRole


class GetUnreadCountRequest(BaseModel):
    """Get unread count request."""

    user_id: str
    role: UserRole


class GetUnreadCountResponse(BaseModel):
    """Get unread count response."""

    count: int


class GetUnreadCountUseCase(AdminUseCase):
    """Use case for the admin badge counter."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetUnreadCountRequest) -> GetUnreadCountResponse:
        self.require_admin(request.user_id, request.role, "moderate", "comments")
        count = await self.comment_service.count_unread()
        return GetUnreadCountResponse(count=count)
