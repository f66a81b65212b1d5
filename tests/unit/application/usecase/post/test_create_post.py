"""Unit tests for CreatePostUseCase."""

import pytest

from forum.application.usecase.post.create_post import (
    CreatePostRequest,
    CreatePostUseCase,
)
from forum.domain.error import AuthorNotFoundError, AuthRequiredError, ValidationError
from forum.domain.repository import PostRepository
from forum.domain.service import IdentityClient
from tests.factories import make_author
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

AUTHOR = "user_author"


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_post(self, unit_env):
        # Arrange
        (await unit_env.get(IdentityClient)).add_user(make_author(AUTHOR))
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)

        # Act
        response = await use_case.execute(
            CreatePostRequest(title="Title", content="Body", user_id=AUTHOR)
        )

        # Assert
        assert response.post.title == "Title"
        assert response.post.rating == 0
        assert response.post.up_vote is False
        assert response.author.id == AUTHOR
        assert len(await post_repo.find_all(limit=10)) == 1

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(AuthRequiredError):
            await use_case.execute(CreatePostRequest(title="Title", content="Body"))

    @pytest.mark.asyncio
    async def test_title_too_long(self, unit_env):
        (await unit_env.get(IdentityClient)).add_user(make_author(AUTHOR))
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreatePostRequest(title="x" * 181, content="Body", user_id=AUTHOR)
            )

        assert exc_info.value.field == "title"

    @pytest.mark.asyncio
    async def test_author_without_profile(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)

        with pytest.raises(AuthorNotFoundError):
            await use_case.execute(
                CreatePostRequest(title="Title", content="Body", user_id=AUTHOR)
            )

        assert await post_repo.find_all(limit=10) == []
