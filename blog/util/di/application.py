"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from blog.application.usecase.moderation import (
    GetUnreadCommentsUseCase,
    GetUnreadCountUseCase,
    MarkCommentReadUseCase,
)
from blog.config import CommentSettings
from blog.domain.service import ArticleService, CommentService, UserService
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        user_service: UserService,
        comment_settings: CommentSettings,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            article_service=article_service,
            user_service=user_service,
            comment_settings=comment_settings,
        )

    @provide
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        user_service: UserService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            article_service=article_service,
            user_service=user_service,
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Moderation use cases
    @provide
    def get_mark_comment_read_use_case(
        self, comment_service: CommentService
    ) -> MarkCommentReadUseCase:
        """Provide mark comment read use case."""
        return MarkCommentReadUseCase(comment_service=comment_service)

    @provide
    def get_unread_comments_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        user_service: UserService,
        comment_settings: CommentSettings,
    ) -> GetUnreadCommentsUseCase:
        """Provide get unread comments use case."""
        return GetUnreadCommentsUseCase(
            comment_service=comment_service,
            article_service=article_service,
            user_service=user_service,
            comment_settings=comment_settings,
        )

    @provide
    def get_unread_count_use_case(
        self, comment_service: CommentService
    ) -> GetUnreadCountUseCase:
        """Provide get unread count use case."""
        return GetUnreadCountUseCase(comment_service=comment_service)
