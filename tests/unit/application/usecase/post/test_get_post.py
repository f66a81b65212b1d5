"""Unit tests for GetPostUseCase."""

from uuid import uuid4

import pytest

from forum.application.usecase.post.get_post import GetPostRequest, GetPostUseCase
from forum.domain.error import NotFoundError
from forum.domain.repository import PostRepository
from forum.domain.service import IdentityClient, VoteService
from forum.domain.value import UserId, VotableType, VoteDirection
from tests.factories import make_author, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

AUTHOR = UserId("user_author")


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_get_post_with_vote_state(self, unit_env):
        (await unit_env.get(IdentityClient)).add_user(make_author(AUTHOR))
        use_case = await unit_env.get(GetPostUseCase)
        vote_service = await unit_env.get(VoteService)
        post = await (await unit_env.get(PostRepository)).save(make_post(AUTHOR))
        await vote_service.cast_vote(
            VotableType.POST, post.id, UserId("user_viewer"), VoteDirection.DOWN
        )

        response = await use_case.execute(
            GetPostRequest(post_id=str(post.id), user_id="user_viewer")
        )

        assert response.post.post_id == str(post.id)
        assert response.post.rating == -1
        assert response.post.down_vote is True
        assert response.author.username == "alice"

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(post_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_malformed_id(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(post_id="nope"))
