"""User domain service."""

import logfire
from typing import Iterable

from blog.domain.model.user import User
from blog.domain.repository import UserRepository
from blog.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for resolving comment authors."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_many(self, user_ids: Iterable[UserId | None]) -> dict[UserId, User]:
        """Get several users keyed by ID.

        ``None`` entries (guest comments) are ignored and users that no
        longer exist are left out, so callers can pass every comment's
        ``author_user_id`` as-is.
        """
        ids = {user_id for user_id in user_ids if user_id is not None}
        if not ids:
            return {}
        with logfire.span("user_service.get_many", count=len(ids)):
            users = await self.user_repository.find_by_ids(ids)
            return {user.id: user for user in users}
