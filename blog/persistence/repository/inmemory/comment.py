"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import ArticleId, CommentId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_article(self, article_id: ArticleId) -> list[Comment]:
        """Find all comments for an article in insertion order."""
        return [c for c in self._comments.values() if c.article_id == article_id]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete_subtree(self, comment_id: CommentId) -> int:
        """Delete a comment and everything below it."""
        if comment_id not in self._comments:
            return 0

        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            current = frontier.pop()
            for c in self._comments.values():
                if c.parent_id == current and c.id not in doomed:
                    doomed.add(c.id)
                    frontier.append(c.id)

        for cid in doomed:
            del self._comments[cid]
        return len(doomed)

    async def mark_article_read(
        self,
        article_id: ArticleId,
        reader_id: UserId,
        read_at: datetime,
    ) -> int:
        """Mark an article's unread comments (not by the reader) as read."""
        marked = 0
        for cid, c in list(self._comments.items()):
            if c.article_id != article_id or c.is_read:
                continue
            if c.author_user_id == reader_id:
                continue
            self._comments[cid] = c.model_copy(
                update={"is_read": True, "read_at": read_at, "read_by": reader_id}
            )
            marked += 1
        return marked

    async def count_unread(self) -> int:
        """Count unread comments."""
        return sum(1 for c in self._comments.values() if not c.is_read)

    async def find_unread(self, limit: int = 20) -> list[Comment]:
        """Find unread comments, newest first."""
        unread = [c for c in self._comments.values() if not c.is_read]
        unread.sort(key=lambda c: c.created_at, reverse=True)
        return unread[:limit]
