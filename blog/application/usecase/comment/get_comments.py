"""Get comments use case."""

from datetime import datetime
from typing import Iterator

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.comment.author import CommentAuthor, author_of
from blog.domain.error import ArticleNotFoundError
from blog.domain.model import User
from blog.domain.service import (
    ArticleService,
    CommentNode,
    CommentService,
    UserService,
    count_nodes,
)
from blog.domain.value import Slug, UserId


class CommentTreeItem(BaseModel):
    """Comment with its nested replies."""

    id: str
    article_id: str
    content: str
    author_user_id: str | None
    author_name: str | None
    parent_id: str | None
    created_at: datetime
    user: CommentAuthor | None = None
    replies: list["CommentTreeItem"] = []

    @classmethod
    def from_node(
        cls, node: CommentNode, users: dict[UserId, User]
    ) -> "CommentTreeItem":
        comment = node.comment
        return cls(
            id=str(comment.id),
            article_id=str(comment.article_id),
            content=comment.content,
            author_user_id=str(comment.author_user_id) if comment.author_user_id else None,
            author_name=comment.author_name,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
            user=author_of(comment.author_user_id, users),
            replies=[cls.from_node(reply, users) for reply in node.replies],
        )


def walk(nodes: list[CommentNode]) -> Iterator[CommentNode]:
    """Yield every node of a forest, parents before their replies."""
    for node in nodes:
        yield node
        yield from walk(node.replies)


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    slug: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    article_id: str
    comments: list[CommentTreeItem]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading an article's comments as a thread."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        user_service: UserService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            article_service: Article domain service
            user_service: User domain service, resolves comment authors
        """
        self.comment_service = comment_service
        self.article_service = article_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Root comments come newest first; replies at every level oldest
        first. Every item carries a ``replies`` list, empty for leaves, and
        the author summary for comments by registered users.

        Args:
            request: Get comments request with the article slug

        Returns:
            Comment forest and total number of comments

        Raises:
            ArticleNotFoundError: If no article has this slug
        """
        try:
            slug = Slug(request.slug)
        except ValueError:
            raise ArticleNotFoundError(request.slug) from None
        article = await self.article_service.get_by_slug(slug)

        roots = await self.comment_service.get_comment_tree(article.id)
        users = await self.user_service.get_many(
            node.comment.author_user_id for node in walk(roots)
        )

        return GetCommentsResponse(
            article_id=str(article.id),
            comments=[CommentTreeItem.from_node(root, users) for root in roots],
            total=count_nodes(roots),
        )
