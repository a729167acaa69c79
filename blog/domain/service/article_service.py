"""Article domain service."""

import logfire
from typing import Iterable

from blog.domain.error import ArticleNotFoundError
from blog.domain.model.article import Article
from blog.domain.repository import ArticleRepository
from blog.domain.value import ArticleId, Slug

from .base import Service


class ArticleService(Service):
    """Domain service for the article lookups comment flows depend on."""

    def __init__(self, article_repository: ArticleRepository) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
        """
        self.article_repository = article_repository

    async def get_by_slug(self, slug: Slug) -> Article:
        """Get an article by slug.

        Args:
            slug: Article slug

        Returns:
            Article entity

        Raises:
            ArticleNotFoundError: If no article has this slug
        """
        with logfire.span("article_service.get_by_slug", slug=slug.root):
            article = await self.article_repository.find_by_slug(slug)
            if not article:
                logfire.warn("Article not found", slug=slug.root)
                raise ArticleNotFoundError(slug.root)
            return article

    async def get_by_id(self, article_id: ArticleId) -> Article:
        """Get an article by ID.

        Raises:
            ArticleNotFoundError: If the article does not exist
        """
        with logfire.span("article_service.get_by_id", article_id=str(article_id)):
            article = await self.article_repository.find_by_id(article_id)
            if not article:
                logfire.warn("Article not found", article_id=str(article_id))
                raise ArticleNotFoundError(str(article_id))
            return article

    async def get_many(self, article_ids: Iterable[ArticleId]) -> dict[ArticleId, Article]:
        """Get several articles keyed by ID; missing ones are left out."""
        ids = set(article_ids)
        if not ids:
            return {}
        articles = await self.article_repository.find_by_ids(ids)
        return {article.id: article for article in articles}
