"""Article aggregate root.

Only the fields the comment flows rely on are modelled here; authoring,
taxonomy and rendering live elsewhere.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import ArticleId, ArticleStatus, Slug, UserId


class Article(DomainModel):
    """Article that comments are attached to."""

    id: ArticleId
    slug: Slug
    title: str = Field(min_length=1, max_length=300)
    status: ArticleStatus = ArticleStatus.DRAFT
    author_id: Optional[UserId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    published_at: Optional[datetime] = None
