"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from blog.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from blog.domain.service import JWTService
from blog.interface.api.routes.auth import require_user

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=5000)
    parent_id: str | None = None  # Parent comment ID for replies
    author_name: str | None = Field(default=None, min_length=1, max_length=100)


@router.get("/articles/{slug}/comments", response_model=GetCommentsResponse)
async def get_comments(
    slug: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get an article's comments as a thread.

    Root comments come newest first; replies oldest first.

    Args:
        slug: Article slug
        get_comments_use_case: Get comments use case from DI

    Returns:
        Comment tree with total count
    """
    try:
        return await get_comments_use_case.execute(GetCommentsRequest(slug=slug))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "/articles/{slug}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    slug: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on an article or reply to a comment.

    Signed-in users comment under their account; guests must give a name.

    Args:
        slug: Article slug
        request: Comment data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie (optional)

    Returns:
        Created comment

    Raises:
        HTTPException: 404 for unknown article or parent, 400 for invalid
            input, a parent from another article, or a thread too deep
    """
    user = jwt_service.get_user_from_token(auth_token)

    try:
        use_case_request = CreateCommentRequest(
            slug=slug,
            content=request.content,
            author_user_id=user.user_id if user else None,
            author_name=request.author_name,
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed - not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except BusinessRuleViolationError as e:
        logfire.warn("Comment creation rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment together with all of its replies. Admins only.

    Raises:
        HTTPException: 401 without a session, 403 for non-admins, 404 if
            the comment does not exist
    """
    user = require_user(jwt_service, auth_token)

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                comment_id=comment_id, user_id=user.user_id, role=user.role
            )
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment deletion attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete comments",
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
