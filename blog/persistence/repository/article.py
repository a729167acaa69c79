"""PostgreSQL implementation of Article repository."""

from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Article
from blog.domain.repository import ArticleRepository
from blog.domain.value import ArticleId, Slug
from blog.persistence.mappers import article_to_dict, row_to_article
from blog.persistence.tables import articles_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug."""
        stmt = select(articles_table).where(articles_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    async def find_by_ids(self, article_ids: Iterable[ArticleId]) -> List[Article]:
        """Find several articles at once."""
        ids = list(article_ids)
        if not ids:
            return []
        stmt = select(articles_table).where(articles_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        return [row_to_article(row._asdict()) for row in result.fetchall()]

    async def save(self, article: Article) -> Article:
        """Save an article (upsert on ID)."""
        values = article_to_dict(article)
        stmt = insert(articles_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[articles_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return article
