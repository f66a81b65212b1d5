"""Integration tests for the PostgreSQL repositories.

Run against a migrated database:

    alembic upgrade head
    DATABASE__URL=postgresql+asyncpg://... pytest tests/integration
"""

import os
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from forum.domain.model import Vote
from forum.domain.repository import CommentRepository, PostRepository, VoteRepository
from forum.domain.value import UserId, VotableType, VoteDirection, VoteId
from tests.factories import make_comment, make_post, make_reply
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="needs a running postgres"
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


def _vote(user_id: str, votable_id, direction: VoteDirection) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        user_id=UserId(user_id),
        votable_type=VotableType.POST,
        votable_id=votable_id,
        direction=direction,
    )


class TestPostgresVoteRepository:
    """Vote exclusivity against the unique constraint."""

    @pytest.mark.asyncio
    async def test_opposite_vote_replaces_previous(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        vote_repo = await integration_env.get(VoteRepository)
        post = await post_repo.save(make_post(UserId("user_it")))

        await vote_repo.save_exclusive(_vote("user_it", post.id, VoteDirection.UP))
        await vote_repo.save_exclusive(_vote("user_it", post.id, VoteDirection.DOWN))

        votes = await vote_repo.find_by_votable(VotableType.POST, post.id)
        assert [v.direction for v in votes] == [VoteDirection.DOWN]

    @pytest.mark.asyncio
    async def test_duplicate_vote_keeps_session_usable(self, integration_env):
        """The savepoint rolls back only the failed vote."""
        post_repo = await integration_env.get(PostRepository)
        vote_repo = await integration_env.get(VoteRepository)
        post = await post_repo.save(make_post(UserId("user_it")))
        await vote_repo.save_exclusive(_vote("user_it", post.id, VoteDirection.UP))

        with pytest.raises(IntegrityError):
            await vote_repo.save_exclusive(_vote("user_it", post.id, VoteDirection.UP))

        votes = await vote_repo.find_by_votable(VotableType.POST, post.id)
        assert len(votes) == 1


class TestPostgresCommentRepository:
    """Comment variants survive the round trip."""

    @pytest.mark.asyncio
    async def test_thread_queries(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        post = await post_repo.save(make_post(UserId("user_it")))
        top = await comment_repo.save(make_comment(post.id, UserId("user_it")))
        reply = await comment_repo.save(make_reply(top, UserId("user_it"), minutes=1))

        top_level = await comment_repo.find_top_level(post.id)
        replies = await comment_repo.find_replies(post.id)

        assert [c.id for c in top_level] == [top.id]
        assert [c.parent_id for c in replies] == [top.id]
        assert [c.id for c in replies] == [reply.id]
