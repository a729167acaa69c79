"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.comment.author import CommentAuthor, author_of
from blog.config import CommentSettings
from blog.domain.error import ArticleNotFoundError, ValidationError
from blog.domain.service import ArticleService, CommentService, UserService
from blog.domain.value import CommentId, Slug, UserId
from blog.util.sanitize import sanitize_text


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    slug: str
    content: str
    author_user_id: str | None = None  # Set when the commenter is signed in
    author_name: str | None = None  # Required for guests
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    id: str
    article_id: str
    content: str
    author_user_id: str | None
    author_name: str | None
    parent_id: str | None
    created_at: datetime
    user: CommentAuthor | None = None


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an article or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        user_service: UserService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            article_service: Article domain service
            user_service: User domain service, resolves the author summary
            comment_settings: Content limits
        """
        self.comment_service = comment_service
        self.article_service = article_service
        self.user_service = user_service
        self.comment_settings = comment_settings

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Resolve the article from its slug
        2. Apply the author rule: signed-in users comment under their
           account and any guest name is ignored; guests must give a name
        3. Sanitize the content down to plain text
        4. Create the comment (service validates parent and depth)

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            ArticleNotFoundError: If no article has this slug
            ValidationError: If the content or author name is unusable
            ValueError: If parent_id is not a UUID
        """
        try:
            slug = Slug(request.slug)
        except ValueError:
            raise ArticleNotFoundError(request.slug) from None
        article = await self.article_service.get_by_slug(slug)

        author_user_id = (
            UserId(UUID(request.author_user_id)) if request.author_user_id else None
        )
        author_name = None
        if author_user_id is None:
            author_name = sanitize_text(request.author_name or "")
            if not author_name:
                raise ValidationError("Name is required for guest comments")
            if len(author_name) > self.comment_settings.max_author_name_length:
                raise ValidationError(
                    f"Name must be at most "
                    f"{self.comment_settings.max_author_name_length} characters"
                )

        content = sanitize_text(request.content)
        if not content:
            raise ValidationError("Comment cannot be empty")
        if len(content) > self.comment_settings.max_content_length:
            raise ValidationError(
                f"Comment must be at most "
                f"{self.comment_settings.max_content_length} characters"
            )

        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None
        comment = await self.comment_service.create_comment(
            article_id=article.id,
            content=content,
            author_user_id=author_user_id,
            author_name=author_name,
            parent_id=parent_id,
        )
        users = await self.user_service.get_many([comment.author_user_id])

        return CreateCommentResponse(
            id=str(comment.id),
            article_id=str(comment.article_id),
            content=comment.content,
            author_user_id=str(comment.author_user_id) if comment.author_user_id else None,
            author_name=comment.author_name,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
            user=author_of(comment.author_user_id, users),
        )
