"""Comment entity.

Comments are threaded replies on articles. The thread is stored as an
adjacency list (``parent_id``) and rebuilt into a tree on read; nesting depth
is bounded at write time by ``CommentTreeBuilder``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from blog.domain.model.common import DomainModel
from blog.domain.value import ArticleId, CommentId, UserId


class Comment(DomainModel):
    """Comment entity.

    A comment is written either by an authenticated user (``author_user_id``)
    or by a guest identified only by ``author_name``, never both.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - created_at: Ordering key for roots (newest first) and replies (oldest first)

    The moderation fields (is_read, read_at, read_by) are set once by an
    administrator and play no part in threading.
    """

    id: CommentId
    article_id: ArticleId
    content: str = Field(min_length=1, max_length=5000)
    author_user_id: Optional[UserId] = None
    author_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    is_read: bool = False
    read_at: Optional[datetime] = None
    read_by: Optional[UserId] = None

    @model_validator(mode="after")
    def validate_author(self) -> "Comment":
        """Exactly one of author_user_id / author_name must be set."""
        if self.author_user_id is None and self.author_name is None:
            raise ValueError("Guest comments require an author name")
        if self.author_user_id is not None and self.author_name is not None:
            raise ValueError("Comments by registered users cannot carry a guest name")
        return self

    @property
    def is_guest(self) -> bool:
        """Whether the comment was written without an account."""
        return self.author_user_id is None
