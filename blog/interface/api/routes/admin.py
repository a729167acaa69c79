"""Comment moderation routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status

from blog.application.usecase.moderation import (
    GetUnreadCommentsRequest,
    GetUnreadCommentsResponse,
    GetUnreadCommentsUseCase,
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
    MarkCommentReadRequest,
    MarkCommentReadResponse,
    MarkCommentReadUseCase,
)
from blog.domain.error import NotAuthorizedError, NotFoundError
from blog.domain.service import JWTService
from blog.interface.api.routes.auth import require_user

router = APIRouter(prefix="/admin/comments", tags=["admin"], route_class=DishkaRoute)


def _forbidden(e: NotAuthorizedError) -> HTTPException:
    logfire.warn("Non-admin moderation attempt", error=str(e))
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Admin access required",
    )


@router.put("/{comment_id}/read", response_model=MarkCommentReadResponse)
async def mark_comment_read(
    comment_id: str,
    mark_comment_read_use_case: FromDishka[MarkCommentReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkCommentReadResponse:
    """Mark a comment and the rest of its article's unread comments as read."""
    user = require_user(jwt_service, auth_token)

    try:
        return await mark_comment_read_use_case.execute(
            MarkCommentReadRequest(
                comment_id=comment_id, user_id=user.user_id, role=user.role
            )
        )
    except NotAuthorizedError as e:
        raise _forbidden(e)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/unread", response_model=GetUnreadCommentsResponse)
async def get_unread_comments(
    get_unread_comments_use_case: FromDishka[GetUnreadCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetUnreadCommentsResponse:
    """List unread comments, newest first.

    ``limit`` is clamped to the configured range rather than rejected.
    """
    user = require_user(jwt_service, auth_token)

    try:
        return await get_unread_comments_use_case.execute(
            GetUnreadCommentsRequest(user_id=user.user_id, role=user.role, limit=limit)
        )
    except NotAuthorizedError as e:
        raise _forbidden(e)


@router.get("/unread-count", response_model=GetUnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetUnreadCountResponse:
    """Count unread comments for the admin badge."""
    user = require_user(jwt_service, auth_token)

    try:
        return await get_unread_count_use_case.execute(
            GetUnreadCountRequest(user_id=user.user_id, role=user.role)
        )
    except NotAuthorizedError as e:
        raise _forbidden(e)
