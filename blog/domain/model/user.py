"""User read model.

Accounts are created and authenticated elsewhere; comment flows only need
enough of a user to show who wrote a comment.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import UserId, UserRole


class User(DomainModel):
    """Registered user as seen by the comment flows."""

    id: UserId
    email: str
    name: Optional[str] = Field(default=None, max_length=255)
    image: Optional[str] = None
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=datetime.now)
