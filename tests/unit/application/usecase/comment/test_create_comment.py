"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from forum.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from forum.domain.error import (
    AuthorNotFoundError,
    AuthRequiredError,
    NotFoundError,
    ValidationError,
)
from forum.domain.repository import PostRepository
from forum.domain.service import CommentService, IdentityClient
from forum.domain.value import CommentType, UserId
from tests.factories import make_author, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

AUTHOR = "user_author"


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        # Arrange
        (await unit_env.get(IdentityClient)).add_user(make_author(AUTHOR))
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        post = await (await unit_env.get(PostRepository)).save(
            make_post(UserId(AUTHOR))
        )

        # Act
        response = await use_case.execute(
            CreateCommentRequest(post_id=str(post.id), content="Hi", user_id=AUTHOR)
        )

        # Assert
        assert response.comment.comment_type == CommentType.POST
        assert response.comment.parent_id is None
        assert response.comment.rating == 0
        assert response.comment.comments == []
        assert response.author.username == "alice"
        _, replies = await comment_service.get_thread(post.id)
        assert replies == []

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        post = await (await unit_env.get(PostRepository)).save(
            make_post(UserId(AUTHOR))
        )

        with pytest.raises(AuthRequiredError):
            await use_case.execute(
                CreateCommentRequest(post_id=str(post.id), content="Hi")
            )

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(uuid4()), content="Hi", user_id=AUTHOR
                )
            )

    @pytest.mark.asyncio
    async def test_empty_content(self, unit_env):
        (await unit_env.get(IdentityClient)).add_user(make_author(AUTHOR))
        use_case = await unit_env.get(CreateCommentUseCase)
        post = await (await unit_env.get(PostRepository)).save(
            make_post(UserId(AUTHOR))
        )

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(post_id=str(post.id), content="", user_id=AUTHOR)
            )

        assert exc_info.value.field == "content"

    @pytest.mark.asyncio
    async def test_author_without_profile(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        post = await (await unit_env.get(PostRepository)).save(
            make_post(UserId(AUTHOR))
        )

        with pytest.raises(AuthorNotFoundError):
            await use_case.execute(
                CreateCommentRequest(post_id=str(post.id), content="Hi", user_id=AUTHOR)
            )

        assert await comment_service.get_thread(post.id) == ([], [])
