"""Vote entity and per-item vote ledger.

Each user can hold at most one vote per item (post or comment), either up
or down. Casting the opposite direction replaces the existing vote.
"""

from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import (
    UserId,
    VotableType,
    VoteDirection,
    VoteId,
    VoteProjection,
)


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per user per item (enforced by database unique constraint)
    - Up and down votes are mutually exclusive for a user on an item
    - Polymorphic reference to votable (post or comment)
    """

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # PostId or CommentId (both are UUIDs)
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)


class VoteLedger(DomainModel):
    """Up and down vote collections for a single votable item."""

    votable_type: VotableType
    votable_id: UUID
    up_votes: list[Vote] = Field(default_factory=list)
    down_votes: list[Vote] = Field(default_factory=list)

    @classmethod
    def from_votes(
        cls, votable_type: VotableType, votable_id: UUID, votes: Iterable[Vote]
    ) -> "VoteLedger":
        """Partition a flat list of votes into a ledger.

        Votes belonging to other items are ignored.
        """
        up_votes: list[Vote] = []
        down_votes: list[Vote] = []
        for vote in votes:
            if vote.votable_type != votable_type or vote.votable_id != votable_id:
                continue
            if vote.direction == VoteDirection.UP:
                up_votes.append(vote)
            else:
                down_votes.append(vote)
        return cls(
            votable_type=votable_type,
            votable_id=votable_id,
            up_votes=up_votes,
            down_votes=down_votes,
        )

    @property
    def rating(self) -> int:
        """Up-vote count minus down-vote count (may be negative)."""
        return len(self.up_votes) - len(self.down_votes)

    def has_voted(self, user_id: UserId, direction: VoteDirection) -> bool:
        """Whether the user holds a vote in the given direction."""
        votes = self.up_votes if direction == VoteDirection.UP else self.down_votes
        return any(vote.user_id == user_id for vote in votes)

    def project(self, user_id: Optional[UserId] = None) -> VoteProjection:
        """Rating and vote state as seen by a user (anonymous if None)."""
        if user_id is None:
            return VoteProjection(rating=self.rating)
        return VoteProjection(
            rating=self.rating,
            up_vote=self.has_voted(user_id, VoteDirection.UP),
            down_vote=self.has_voted(user_id, VoteDirection.DOWN),
        )
