"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from forum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyResponse,
    CreateReplyUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from forum.domain.error import DomainError
from forum.domain.service import JWTService
from forum.interface.api.errors import http_error

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment or reply."""

    content: str


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """Get the comment tree for a post.

    If authenticated, each node carries the caller's vote state.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie (optional)

    Returns:
        Top-level comments with nested replies, oldest first
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(post_id=post_id, user_id=user_id)
        )
    except DomainError as e:
        raise http_error(e, "Get comments")


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a post.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if post not found,
            422 if content is out of bounds
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id, content=request.content, user_id=user_id
        )
        return await create_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise http_error(e, "Create comment")


@router.post(
    "/{post_id}/comments/{comment_id}/replies",
    response_model=CreateReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    post_id: str,
    comment_id: str,
    request: CreateCommentAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateReplyResponse:
    """Reply to a comment on a post.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the post or parent
            comment is missing, 422 if content is out of bounds
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        use_case_request = CreateReplyRequest(
            post_id=post_id,
            comment_id=comment_id,
            content=request.content,
            user_id=user_id,
        )
        return await create_reply_use_case.execute(use_case_request)
    except DomainError as e:
        raise http_error(e, "Create reply")
