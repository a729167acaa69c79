"""In-memory article repository for testing."""

from typing import Iterable, Optional

from blog.domain.model.article import Article
from blog.domain.repository.article import ArticleRepository
from blog.domain.value import ArticleId, Slug


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._articles.get(article_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug."""
        for article in self._articles.values():
            if article.slug == slug:
                return article
        return None

    async def find_by_ids(self, article_ids: Iterable[ArticleId]) -> list[Article]:
        """Find several articles at once."""
        return [self._articles[i] for i in article_ids if i in self._articles]

    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        self._articles[article.id] = article
        return article
