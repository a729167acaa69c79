"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from blog.domain.value.common import RootValueObject


class UserRole(str, Enum):
    """Role carried by an authenticated user."""

    USER = "user"
    ADMIN = "admin"


class ArticleStatus(str, Enum):
    """Publication workflow state of an article."""

    DRAFT = "draft"
    PUBLISHED = "published"


class Slug(RootValueObject[str]):
    """URL-safe slug for articles.

    Lowercase words separated by single hyphens, 1-200 characters.
    Non-ASCII letters (e.g. CJK titles) are kept as-is.
    Examples: 'hello-world', 'notes-on-asyncio-2'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if len(v) < 1 or len(v) > 200:
            raise ValueError("Slug must be 1-200 characters")
        if not re.match(r"^[^\W_]+(?:-[^\W_]+)*$", v) or v != v.lower():
            raise ValueError(
                "Slug must be lowercase words separated by hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v
