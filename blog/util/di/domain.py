"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings, CommentSettings
from blog.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from blog.domain.service import (
    ArticleService,
    CommentService,
    CommentTreeBuilder,
    JWTService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped to align with the repository/session
    lifecycle. The tree builder only holds the configured depth limit, so a
    single instance serves the whole app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_comment_tree_builder(
        self, comment_settings: CommentSettings
    ) -> CommentTreeBuilder:
        """Provide comment tree builder with the configured depth limit."""
        return CommentTreeBuilder(max_depth=comment_settings.max_depth)

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        tree_builder: CommentTreeBuilder,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, tree_builder=tree_builder
        )

    @provide
    def get_article_service(
        self, article_repository: ArticleRepository
    ) -> ArticleService:
        """Provide article domain service."""
        return ArticleService(article_repository=article_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
