"""Cast vote use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.common import parse_id, require_user
from forum.domain.error import NotFoundError
from forum.domain.service import CommentService, VoteService
from forum.domain.value import (
    CommentId,
    CommentType,
    VotableType,
    VoteDirection,
    VoteProjection,
)


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    direction: VoteDirection
    comment_type: CommentType | None = None  # Expected kind when voting on a comment
    user_id: str | None = None  # Voter, from the authenticated caller


class CastVoteResponse(BaseModel):
    """Cast vote response.

    changed is False when the caller already held a vote in the requested
    direction and nothing was written.
    """

    votable_type: VotableType
    votable_id: str
    rating: int
    up_vote: bool
    down_vote: bool
    changed: bool


class CastVoteUseCase:
    """Use case for voting a post or comment up or down."""

    def __init__(
        self, vote_service: VoteService, comment_service: CommentService
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            comment_service: Comment domain service
        """
        self.vote_service = vote_service
        self.comment_service = comment_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Steps:
        1. Require an authenticated caller
        2. For comments with an expected kind, check the comment matches it
        3. Skip the write if the caller already voted this way
        4. Otherwise cast the vote, replacing any opposite vote

        Raises:
            AuthRequiredError: If caller is anonymous
            NotFoundError: If the item is missing or of the wrong kind
            DuplicateVoteError: If a concurrent identical vote won the race
        """
        user_id = require_user(request.user_id, "vote")
        resource = request.votable_type.value.capitalize()
        votable_id = parse_id(request.votable_id, resource)

        if (
            request.votable_type == VotableType.COMMENT
            and request.comment_type is not None
        ):
            comment = await self.comment_service.get_comment_by_id(
                CommentId(votable_id)
            )
            if not comment or comment.comment_type != request.comment_type:
                raise NotFoundError(resource, request.votable_id)

        current = await self.vote_service.get_projection(
            request.votable_type, votable_id, user_id
        )
        already_voted = (
            current.up_vote
            if request.direction == VoteDirection.UP
            else current.down_vote
        )
        if already_voted:
            logfire.info(
                "Vote unchanged",
                votable_id=request.votable_id,
                direction=request.direction.value,
            )
            return self._response(request, current, changed=False)

        ledger = await self.vote_service.cast_vote(
            request.votable_type, votable_id, user_id, request.direction
        )
        return self._response(request, ledger.project(user_id), changed=True)

    @staticmethod
    def _response(
        request: CastVoteRequest, projection: VoteProjection, changed: bool
    ) -> CastVoteResponse:
        return CastVoteResponse(
            votable_type=request.votable_type,
            votable_id=request.votable_id,
            rating=projection.rating,
            up_vote=projection.up_vote,
            down_vote=projection.down_vote,
            changed=changed,
        )
