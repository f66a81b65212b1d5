"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from forum.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from forum.domain.error import DomainError
from forum.domain.service import JWTService
from forum.domain.value import CommentType, VotableType, VoteDirection
from forum.interface.api.errors import http_error

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class PostVoteAPIRequest(BaseModel):
    """API request for voting on a post."""

    direction: VoteDirection


class CommentVoteAPIRequest(BaseModel):
    """API request for voting on a comment."""

    direction: VoteDirection
    comment_type: CommentType | None = None


@router.post("/posts/{post_id}/vote", response_model=CastVoteResponse)
async def vote_post(
    post_id: str,
    request: PostVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote a post up or down.

    Requires authentication. Voting the opposite way replaces the
    caller's previous vote; repeating a vote changes nothing.

    Args:
        post_id: Post UUID
        request: Vote direction
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Rating and the caller's vote state after the vote

    Raises:
        HTTPException: 401 if not authenticated, 404 if post not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        use_case_request = CastVoteRequest(
            votable_type=VotableType.POST,
            votable_id=post_id,
            direction=request.direction,
            user_id=user_id,
        )
        return await cast_vote_use_case.execute(use_case_request)
    except DomainError as e:
        raise http_error(e, "Vote on post")


@router.post("/comments/{comment_id}/vote", response_model=CastVoteResponse)
async def vote_comment(
    comment_id: str,
    request: CommentVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote a comment up or down.

    Requires authentication. comment_type, when given, must match the
    comment's kind ("post" for top-level, "comment" for replies).

    Raises:
        HTTPException: 401 if not authenticated, 404 if comment not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        use_case_request = CastVoteRequest(
            votable_type=VotableType.COMMENT,
            votable_id=comment_id,
            direction=request.direction,
            comment_type=request.comment_type,
            user_id=user_id,
        )
        return await cast_vote_use_case.execute(use_case_request)
    except DomainError as e:
        raise http_error(e, "Vote on comment")
