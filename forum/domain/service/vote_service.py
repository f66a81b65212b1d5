"""Vote domain service."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import DuplicateVoteError, NotFoundError
from forum.domain.model.vote import Vote, VoteLedger
from forum.domain.repository import VoteRepository
from forum.domain.value import (
    CommentId,
    PostId,
    UserId,
    VotableType,
    VoteDirection,
    VoteId,
    VoteProjection,
)

from .base import Service
from .comment_service import CommentService
from .post_service import PostService


class VoteService(Service):
    """Domain service for vote operations.

    A vote toggle is exclusive: casting one direction removes the user's
    vote in the other direction in the same transaction.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.comment_service = comment_service

    async def cast_vote(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        user_id: UserId,
        direction: VoteDirection,
    ) -> VoteLedger:
        """Cast a vote on a post or comment.

        Args:
            votable_type: Type of item being voted on
            votable_id: ID of the item
            user_id: Voting user
            direction: Up or down

        Returns:
            The item's ledger after the vote

        Raises:
            NotFoundError: If the item does not exist
            DuplicateVoteError: If the user already voted in this direction
        """
        with logfire.span(
            "vote_service.cast_vote",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            user_id=user_id,
            direction=direction.value,
        ):
            await self._ensure_votable_exists(votable_type, votable_id)

            vote = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                votable_type=votable_type,
                votable_id=votable_id,
                direction=direction,
                created_at=datetime.now(),
            )

            try:
                await self.vote_repository.save_exclusive(vote)
            except IntegrityError:
                logfire.warn(
                    "Duplicate vote attempt",
                    user_id=user_id,
                    votable_id=str(votable_id),
                    direction=direction.value,
                )
                raise DuplicateVoteError(
                    votable_type.value, str(votable_id), direction.value
                )

            ledger = await self.get_ledger(votable_type, votable_id)
            logfire.info(
                "Vote cast",
                votable_id=str(votable_id),
                direction=direction.value,
                rating=ledger.rating,
            )
            return ledger

    async def get_ledger(
        self, votable_type: VotableType, votable_id: UUID
    ) -> VoteLedger:
        """Get the up and down votes for one item.

        Args:
            votable_type: Type of item
            votable_id: ID of the item

        Returns:
            Vote ledger (empty if nobody voted)
        """
        votes = await self.vote_repository.find_by_votable(votable_type, votable_id)
        return VoteLedger.from_votes(votable_type, votable_id, votes)

    async def get_ledgers(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> dict[UUID, VoteLedger]:
        """Get ledgers for many items of the same type with one query.

        Every requested ID gets a ledger, empty if nobody voted on it.

        Args:
            votable_type: Type of the items
            votable_ids: IDs of the items

        Returns:
            Dict mapping item ID to its ledger
        """
        if not votable_ids:
            return {}

        votes = await self.vote_repository.find_by_votables(votable_type, votable_ids)
        by_item: dict[UUID, list[Vote]] = {item_id: [] for item_id in votable_ids}
        for vote in votes:
            if vote.votable_id in by_item:
                by_item[vote.votable_id].append(vote)

        return {
            item_id: VoteLedger.from_votes(votable_type, item_id, item_votes)
            for item_id, item_votes in by_item.items()
        }

    async def get_projection(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        user_id: Optional[UserId] = None,
    ) -> VoteProjection:
        """Get an item's rating and the user's vote state."""
        ledger = await self.get_ledger(votable_type, votable_id)
        return ledger.project(user_id)

    async def _ensure_votable_exists(
        self, votable_type: VotableType, votable_id: UUID
    ) -> None:
        if votable_type == VotableType.POST:
            await self.post_service.get_post(PostId(votable_id))
            return

        comment = await self.comment_service.get_comment_by_id(CommentId(votable_id))
        if not comment:
            logfire.warn("Vote on non-existent comment", comment_id=str(votable_id))
            raise NotFoundError("Comment", str(votable_id))
