"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
)
from forum.domain.error import DomainError
from forum.domain.service import JWTService
from forum.interface.api.errors import http_error

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post.

    Length bounds are enforced by the domain so errors name the field.
    """

    title: str
    content: str


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List the newest posts with authors and the caller's vote state.

    Args:
        list_posts_use_case: List posts use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie (optional)

    Returns:
        Up to 100 posts, newest first
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        return await list_posts_use_case.execute(ListPostsRequest(user_id=user_id))
    except DomainError as e:
        raise http_error(e, "List posts")


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreatePostResponse:
    """Create a new post.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 422 if title or content is
            out of bounds
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        use_case_request = CreatePostRequest(
            title=request.title, content=request.content, user_id=user_id
        )
        return await create_post_use_case.execute(use_case_request)
    except DomainError as e:
        raise http_error(e, "Create post")


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetPostResponse:
    """Get a single post.

    Raises:
        HTTPException: 404 if post not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        return await get_post_use_case.execute(
            GetPostRequest(post_id=post_id, user_id=user_id)
        )
    except DomainError as e:
        raise http_error(e, "Get post")
