"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from blog.domain.error import NotAuthorizedError
from blog.domain.value import UserRole


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class AdminUseCase(BaseUseCase):
    """Use case reserved for administrators."""

    def require_admin(
        self, user_id: str | None, role: UserRole | None, action: str, resource: str
    ) -> None:
        """Reject callers without the admin role.

        Raises:
            NotAuthorizedError: If the caller is not an administrator
        """
        if role != UserRole.ADMIN:
            raise NotAuthorizedError(action, resource, user_id)
