"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from blog.domain.model.comment import Comment
from blog.domain.value import ArticleId, CommentId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find all comments for an article.

        No ordering is guaranteed; callers build the display tree themselves.

        Args:
            article_id: The article ID

        Returns:
            Flat list of the article's comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete_subtree(self, comment_id: CommentId) -> int:
        """Delete a comment together with all of its descendants.

        Args:
            comment_id: Root of the subtree to delete

        Returns:
            Number of comments removed (0 if the comment did not exist)
        """
        pass

    @abstractmethod
    async def mark_article_read(
        self,
        article_id: ArticleId,
        reader_id: UserId,
        read_at: datetime,
    ) -> int:
        """Mark an article's unread comments as read.

        Comments written by the reader themselves are left untouched.

        Args:
            article_id: The article whose comments are being read
            reader_id: The moderator marking them
            read_at: Timestamp to record

        Returns:
            Number of comments marked
        """
        pass

    @abstractmethod
    async def count_unread(self) -> int:
        """Count unread comments across all articles."""
        pass

    @abstractmethod
    async def find_unread(self, limit: int = 20) -> List[Comment]:
        """Find unread comments, newest first.

        Args:
            limit: Maximum number of comments to return

        Returns:
            List of unread comments
        """
        pass
