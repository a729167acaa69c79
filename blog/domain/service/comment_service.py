"""Comment domain service."""

import logfire
from datetime import datetime
from uuid import uuid4

from blog.domain.error import (
    CommentNotFoundError,
    InvalidParentArticleError,
    MaxDepthExceededError,
    ParentCommentNotFoundError,
    ValidationError,
)
from blog.domain.model.comment import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import ArticleId, CommentId, UserId

from .base import Service
from .comment_tree import CommentNode, CommentTreeBuilder, count_nodes


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        tree_builder: CommentTreeBuilder,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            tree_builder: Tree builder carrying the configured depth limit
        """
        self.comment_repository = comment_repository
        self.tree_builder = tree_builder

    async def create_comment(
        self,
        article_id: ArticleId,
        content: str,
        author_user_id: UserId | None = None,
        author_name: str | None = None,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on an article or reply to another comment.

        Every check runs before the insert, so a rejected comment is never
        partially written.

        Args:
            article_id: Article ID
            content: Sanitized comment text
            author_user_id: Authenticated author (None for guests)
            author_name: Guest display name (None for authenticated authors)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ParentCommentNotFoundError: If the parent does not exist
            InvalidParentArticleError: If the parent belongs to another article
            ValidationError: If a guest comment has no author name
            MaxDepthExceededError: If the reply would be nested too deeply
        """
        with logfire.span(
            "comment_service.create_comment",
            article_id=str(article_id),
            author_user_id=str(author_user_id) if author_user_id else None,
            guest=author_user_id is None,
            parent_id=str(parent_id) if parent_id else None,
        ):
            if author_user_id is None and not author_name:
                raise ValidationError("Guest comments require an author name")

            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        article_id=str(article_id),
                    )
                    raise ParentCommentNotFoundError(str(parent_id))
                if parent.article_id != article_id:
                    logfire.warn(
                        "Parent comment does not belong to article",
                        parent_id=str(parent_id),
                        parent_article_id=str(parent.article_id),
                        target_article_id=str(article_id),
                    )
                    raise InvalidParentArticleError(str(parent_id), str(article_id))

                check = await self.tree_builder.check_depth(
                    parent_id, self.comment_repository.find_by_id
                )
                if not check.allowed:
                    logfire.warn(
                        "Maximum comment depth exceeded",
                        parent_id=str(parent_id),
                        depth=check.depth,
                        max_depth=check.max_depth,
                    )
                    raise MaxDepthExceededError(check.max_depth)
                depth = check.depth

            comment = Comment(
                id=CommentId(uuid4()),
                article_id=article_id,
                content=content,
                author_user_id=author_user_id,
                author_name=None if author_user_id else author_name,
                parent_id=parent_id,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                article_id=str(article_id),
                depth=depth,
            )
            return saved

    async def get_comment_tree(self, article_id: ArticleId) -> list[CommentNode]:
        """Get an article's comments as a reply forest.

        Args:
            article_id: Article ID

        Returns:
            Root nodes, newest first, each with replies oldest first
        """
        with logfire.span(
            "comment_service.get_comment_tree", article_id=str(article_id)
        ):
            comments = await self.comment_repository.find_by_article(article_id)
            roots = self.tree_builder.build_tree(comments)
            logfire.info(
                "Comment tree built",
                article_id=str(article_id),
                count=count_nodes(roots),
                root_count=len(roots),
            )
            return roots

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def delete_comment(self, comment_id: CommentId) -> int:
        """Delete a comment and every reply beneath it.

        Args:
            comment_id: Comment ID

        Returns:
            Number of comments removed

        Raises:
            CommentNotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found for deletion", comment_id=str(comment_id))
                raise CommentNotFoundError(str(comment_id))

            deleted = await self.comment_repository.delete_subtree(comment_id)
            logfire.info(
                "Comment subtree deleted",
                comment_id=str(comment_id),
                article_id=str(comment.article_id),
                deleted=deleted,
            )
            return deleted

    async def mark_article_read(
        self, comment_id: CommentId, reader_id: UserId
    ) -> tuple[Comment, int]:
        """Mark a comment, and every unread comment of its article, as read.

        Opening one comment means the moderator reads the whole thread, so
        all of the article's unread comments not written by the moderator
        are marked together.

        Args:
            comment_id: Comment the moderator opened
            reader_id: Moderator user ID

        Returns:
            Refreshed comment and the number of comments marked

        Raises:
            CommentNotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.mark_article_read",
            comment_id=str(comment_id),
            reader_id=str(reader_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                raise CommentNotFoundError(str(comment_id))

            marked = await self.comment_repository.mark_article_read(
                article_id=comment.article_id,
                reader_id=reader_id,
                read_at=datetime.now(),
            )
            refreshed = await self.comment_repository.find_by_id(comment_id)
            if refreshed is None:
                raise CommentNotFoundError(str(comment_id))

            logfire.info(
                "Article comments marked read",
                article_id=str(comment.article_id),
                marked=marked,
            )
            return refreshed, marked

    async def count_unread(self) -> int:
        """Count unread comments across all articles."""
        with logfire.span("comment_service.count_unread"):
            return await self.comment_repository.count_unread()

    async def list_unread(self, limit: int) -> list[Comment]:
        """List unread comments, newest first.

        Args:
            limit: Maximum number of comments to return

        Returns:
            Unread comments
        """
        with logfire.span("comment_service.list_unread", limit=limit):
            comments = await self.comment_repository.find_unread(limit=limit)
            logfire.info("Unread comments retrieved", count=len(comments))
            return comments
