"""Request identity helpers shared by the routes.

Sessions are issued elsewhere; routes only read the ``auth_token`` cookie.
A missing or invalid token means an anonymous visitor.
"""

from fastapi import HTTPException, status

from blog.domain.service import JWTService
from blog.util.jwt import TokenPayload


def require_user(jwt_service: JWTService, auth_token: str | None) -> TokenPayload:
    """Resolve the caller or answer 401.

    Raises:
        HTTPException: 401 if there is no valid token
    """
    user = jwt_service.get_user_from_token(auth_token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user
