"""Author summary attached to comment responses."""

from typing import Optional

from pydantic import BaseModel

from blog.domain.model import User
from blog.domain.value import UserId


class CommentAuthor(BaseModel):
    """Display details of the registered user who wrote a comment."""

    id: str
    name: str | None
    image: str | None

    @classmethod
    def from_user(cls, user: User) -> "CommentAuthor":
        return cls(id=str(user.id), name=user.name, image=user.image)


def author_of(
    author_user_id: Optional[UserId], users: dict[UserId, User]
) -> CommentAuthor | None:
    """Look up a comment's author; None for guests and deleted accounts."""
    if author_user_id is None:
        return None
    user = users.get(author_user_id)
    return CommentAuthor.from_user(user) if user else None
