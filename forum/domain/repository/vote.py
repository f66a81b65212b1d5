"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence
from uuid import UUID

from forum.domain.model.vote import Vote
from forum.domain.value import VotableType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_votable(
        self, votable_type: VotableType, votable_id: UUID
    ) -> List[Vote]:
        """Find all votes for a votable item.

        Args:
            votable_type: Type of item (post or comment)
            votable_id: ID of the item

        Returns:
            Votes in both directions
        """
        pass

    @abstractmethod
    async def find_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> List[Vote]:
        """Find all votes for several items of the same type (batch query).

        Args:
            votable_type: Type of the items
            votable_ids: IDs of the items

        Returns:
            Votes in both directions for any of the items
        """
        pass

    @abstractmethod
    async def save_exclusive(self, vote: Vote) -> Vote:
        """Store a vote, replacing the user's opposite-direction vote.

        Removing the opposite vote and inserting the new one happen in one
        transaction: no reader ever sees both directions for a user.

        Args:
            vote: The vote to cast

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already holds a vote in this direction
        """
        pass
