"""Builders for test data."""

import re
from datetime import datetime
from uuid import uuid4

from blog.domain.model import Article, Comment, User
from blog.domain.value import ArticleId, ArticleStatus, CommentId, Slug, UserId


def make_slug(title: str) -> Slug:
    """Build a slug from a title for test articles."""
    slug_str = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")[:100]
    return Slug(slug_str or "test-article")


def make_article(title: str = "Hello World", **overrides) -> Article:
    """Build a published article."""
    values = {
        "id": ArticleId(uuid4()),
        "slug": make_slug(title),
        "title": title,
        "status": ArticleStatus.PUBLISHED,
        "published_at": datetime(2024, 1, 1, 9, 0),
    }
    values.update(overrides)
    return Article(**values)


def make_comment(
    article_id: ArticleId,
    created_at: datetime,
    parent_id: CommentId | None = None,
    **overrides,
) -> Comment:
    """Build a guest comment."""
    values = {
        "id": CommentId(uuid4()),
        "article_id": article_id,
        "content": "A comment",
        "author_name": "Guest",
        "parent_id": parent_id,
        "created_at": created_at,
    }
    values.update(overrides)
    return Comment(**values)


def make_user(name: str | None = "Ada Lovelace", **overrides) -> User:
    """Build a registered user with a unique email."""
    user_id = UserId(uuid4())
    values = {
        "id": user_id,
        "email": f"{user_id.hex[:12]}@example.com",
        "name": name,
    }
    values.update(overrides)
    return User(**values)
