"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import ArticleId, CommentId, UserId
from blog.persistence.mappers import comment_to_dict, row_to_comment
from blog.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find all comments for an article."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.article_id == article_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete_subtree(self, comment_id: CommentId) -> int:
        """Delete a comment and its descendants.

        Descendant IDs are collected with a recursive CTE and removed in one
        statement; the ``parent_id`` foreign key cascades as well.
        """
        replies = comments_table.alias("replies")
        subtree = (
            select(comments_table.c.id)
            .where(comments_table.c.id == comment_id)
            .cte("subtree", recursive=True)
        )
        subtree = subtree.union_all(
            select(replies.c.id).where(replies.c.parent_id == subtree.c.id)
        )

        stmt = comments_table.delete().where(
            comments_table.c.id.in_(select(subtree.c.id))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def mark_article_read(
        self,
        article_id: ArticleId,
        reader_id: UserId,
        read_at: datetime,
    ) -> int:
        """Mark an article's unread comments (not by the reader) as read."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.article_id == article_id)
            .where(comments_table.c.is_read.is_(False))
            .where(
                or_(
                    comments_table.c.author_user_id.is_(None),
                    comments_table.c.author_user_id != reader_id,
                )
            )
            .values(is_read=True, read_at=read_at, read_by=reader_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def count_unread(self) -> int:
        """Count unread comments."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.is_read.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_unread(self, limit: int = 20) -> List[Comment]:
        """Find unread comments, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.is_read.is_(False))
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]
