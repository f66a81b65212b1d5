"""In-memory vote repository for testing."""

from typing import Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from forum.domain.model.vote import Vote
from forum.domain.repository.vote import VoteRepository
from forum.domain.value import VotableType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_votable(
        self, votable_type: VotableType, votable_id: UUID
    ) -> list[Vote]:
        """Find all votes for a votable item."""
        return [
            v
            for v in self._votes
            if v.votable_type == votable_type and v.votable_id == votable_id
        ]

    async def find_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> list[Vote]:
        """Find all votes for several items (batch query)."""
        if not votable_ids:
            return []

        wanted = set(votable_ids)
        return [
            v
            for v in self._votes
            if v.votable_type == votable_type and v.votable_id in wanted
        ]

    async def save_exclusive(self, vote: Vote) -> Vote:
        """Replace the user's opposite vote with this one.

        Raises:
            IntegrityError: If the user already voted in this direction
        """
        mine = [
            v
            for v in await self.find_by_votable(vote.votable_type, vote.votable_id)
            if v.user_id == vote.user_id
        ]
        if any(v.direction == vote.direction for v in mine):
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes = [v for v in self._votes if v not in mine]
        self._votes.append(vote)
        return vote
