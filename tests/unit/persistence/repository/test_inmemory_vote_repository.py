"""Unit tests for the in-memory vote repository."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from forum.domain.model import Vote
from forum.domain.value import UserId, VotableType, VoteDirection, VoteId
from forum.persistence.repository.inmemory import InMemoryVoteRepository


def _vote(user_id: str, votable_id, direction: VoteDirection) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        user_id=UserId(user_id),
        votable_type=VotableType.POST,
        votable_id=votable_id,
        direction=direction,
    )


class TestSaveExclusive:
    """Tests for save_exclusive."""

    @pytest.mark.asyncio
    async def test_replaces_opposite_vote(self):
        repo = InMemoryVoteRepository()
        post_id = uuid4()

        await repo.save_exclusive(_vote("u1", post_id, VoteDirection.UP))
        await repo.save_exclusive(_vote("u1", post_id, VoteDirection.DOWN))

        votes = await repo.find_by_votable(VotableType.POST, post_id)
        assert [v.direction for v in votes] == [VoteDirection.DOWN]

    @pytest.mark.asyncio
    async def test_same_direction_violates_uniqueness(self):
        repo = InMemoryVoteRepository()
        post_id = uuid4()
        await repo.save_exclusive(_vote("u1", post_id, VoteDirection.UP))

        with pytest.raises(IntegrityError):
            await repo.save_exclusive(_vote("u1", post_id, VoteDirection.UP))

    @pytest.mark.asyncio
    async def test_other_users_untouched(self):
        repo = InMemoryVoteRepository()
        post_id = uuid4()
        await repo.save_exclusive(_vote("u1", post_id, VoteDirection.UP))
        await repo.save_exclusive(_vote("u2", post_id, VoteDirection.UP))

        await repo.save_exclusive(_vote("u1", post_id, VoteDirection.DOWN))

        votes = await repo.find_by_votable(VotableType.POST, post_id)
        assert {(v.user_id, v.direction) for v in votes} == {
            ("u1", VoteDirection.DOWN),
            ("u2", VoteDirection.UP),
        }


class TestFindByVotables:
    """Tests for the batch lookup."""

    @pytest.mark.asyncio
    async def test_filters_by_type_and_ids(self):
        repo = InMemoryVoteRepository()
        wanted, other = uuid4(), uuid4()
        await repo.save_exclusive(_vote("u1", wanted, VoteDirection.UP))
        await repo.save_exclusive(_vote("u1", other, VoteDirection.UP))

        votes = await repo.find_by_votables(VotableType.POST, [wanted])
        assert [v.votable_id for v in votes] == [wanted]
        assert await repo.find_by_votables(VotableType.COMMENT, [wanted]) == []
        assert await repo.find_by_votables(VotableType.POST, []) == []
