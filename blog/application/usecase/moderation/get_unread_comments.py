"""Get unread comments use case."""

from datetime import datetime

from pydantic import BaseModel

from blog.application.usecase.base import AdminUseCase
from blog.application.usecase.comment.author import CommentAuthor, author_of
from blog.config import CommentSettings
from blog.domain.service import ArticleService, CommentService, UserService
from blog.domain.value import UserRole


class UnreadArticle(BaseModel):
    """Article summary shown next to an unread comment."""

    id: str
    title: str
    slug: str


class UnreadCommentItem(BaseModel):
    """Unread comment in the moderation inbox."""

    id: str
    content: str
    author_user_id: str | None
    author_name: str | None
    parent_id: str | None
    created_at: datetime
    article: UnreadArticle | None
    user: CommentAuthor | None = None


class GetUnreadCommentsRequest(BaseModel):
    """Get unread comments request."""

    user_id: str
    role: UserRole
    limit: int | None = None


class GetUnreadCommentsResponse(BaseModel):
    """Get unread comments response."""

    comments: list[UnreadCommentItem]
    limit: int


class GetUnreadCommentsUseCase(AdminUseCase):
    """Use case for the admin inbox of comments not yet read."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        user_service: UserService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get unread comments use case.

        Args:
            comment_service: Comment domain service
            article_service: Article domain service
            user_service: User domain service
            comment_settings: Listing limits
        """
        self.comment_service = comment_service
        self.article_service = article_service
        self.user_service = user_service
        self.comment_settings = comment_settings

    def _clamp_limit(self, limit: int | None) -> int:
        if limit is None:
            return self.comment_settings.unread_default_limit
        return max(1, min(limit, self.comment_settings.unread_max_limit))

    async def execute(
        self, request: GetUnreadCommentsRequest
    ) -> GetUnreadCommentsResponse:
        """List unread comments, newest first, with their articles and authors.

        Raises:
            NotAuthorizedError: If the caller is not an administrator
        """
        self.require_admin(request.user_id, request.role, "moderate", "comments")

        limit = self._clamp_limit(request.limit)
        comments = await self.comment_service.list_unread(limit)
        articles = await self.article_service.get_many(c.article_id for c in comments)
        users = await self.user_service.get_many(c.author_user_id for c in comments)

        items = []
        for comment in comments:
            article = articles.get(comment.article_id)
            items.append(
                UnreadCommentItem(
                    id=str(comment.id),
                    content=comment.content,
                    author_user_id=(
                        str(comment.author_user_id) if comment.author_user_id else None
                    ),
                    author_name=comment.author_name,
                    parent_id=str(comment.parent_id) if comment.parent_id else None,
                    created_at=comment.created_at,
                    article=UnreadArticle(
                        id=str(article.id), title=article.title, slug=str(article.slug)
                    )
                    if article
                    else None,
                    user=author_of(comment.author_user_id, users),
                )
            )

        return GetUnreadCommentsResponse(comments=items, limit=limit)
