"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from blog.domain.model.article import Article
from blog.domain.value import ArticleId, Slug


class ArticleRepository(ABC):
    """Repository for Article aggregate.

    Defines the contract for article persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID.

        Args:
            article_id: The article's unique identifier

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by its URL slug.

        Args:
            slug: The article's slug

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, article_ids: Iterable[ArticleId]) -> List[Article]:
        """Find several articles at once; unknown IDs are skipped."""
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update).

        Args:
            article: The article to save

        Returns:
            The saved article
        """
        pass
