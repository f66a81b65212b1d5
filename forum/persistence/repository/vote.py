"""PostgreSQL implementation of Vote repository."""

from typing import List, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Vote
from forum.domain.repository import VoteRepository
from forum.domain.value import VotableType
from forum.persistence.mappers import row_to_vote, vote_to_dict
from forum.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_votable(
        self, votable_type: VotableType, votable_id: UUID
    ) -> List[Vote]:
        """Find all votes for a votable item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> List[Vote]:
        """Find all votes for several items (batch query)."""
        if not votable_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save_exclusive(self, vote: Vote) -> Vote:
        """Replace the user's opposite vote with this one.

        Runs inside a savepoint so a duplicate rolls back the delete too and
        leaves the request transaction usable.

        Raises:
            IntegrityError: If the user already holds a vote in this direction
        """
        async with self.session.begin_nested():
            await self.session.execute(
                delete(votes_table).where(
                    and_(
                        votes_table.c.user_id == vote.user_id,
                        votes_table.c.votable_type == vote.votable_type.value,
                        votes_table.c.votable_id == vote.votable_id,
                        votes_table.c.direction == vote.direction.opposite.value,
                    )
                )
            )
            await self.session.execute(insert(votes_table).values(**vote_to_dict(vote)))
        return vote
