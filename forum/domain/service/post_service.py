"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
import pydantic

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model.post import Post
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(self, author_id: UserId, title: str, content: str) -> Post:
        """Create a post.

        Args:
            author_id: Author user ID
            title: Post title (1-180 characters)
            content: Post body (1-360 characters)

        Returns:
            Created post

        Raises:
            ValidationError: If title or content is out of bounds
        """
        with logfire.span(
            "post_service.create_post", author_id=author_id, title=title
        ):
            try:
                post = Post(
                    id=PostId(uuid4()),
                    author_id=author_id,
                    title=title,
                    content=content,
                    created_at=datetime.now(),
                )
            except pydantic.ValidationError as e:
                error = ValidationError.from_pydantic(e)
                logfire.warn(
                    "Post rejected", field=error.field, reason=error.message
                )
                raise error

            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), author_id=author_id)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID, failing if it does not exist.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_recent(self, limit: int) -> list[Post]:
        """List the most recent posts.

        Args:
            limit: Maximum number of posts (fixed fetch cap)

        Returns:
            Posts, newest first
        """
        with logfire.span("post_service.list_recent", limit=limit):
            posts = await self.post_repository.find_all(limit=limit)
            logfire.info("Posts retrieved", count=len(posts))
            return posts
