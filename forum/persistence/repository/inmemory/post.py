"""In-memory post repository for testing."""

from typing import Optional

from forum.domain.model.post import Post
from forum.domain.repository.post import PostRepository
from forum.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self, limit: int = 100) -> list[Post]:
        """Find the most recent posts, newest first."""
        posts = sorted(
            self._posts.values(), key=lambda p: (p.created_at, p.id), reverse=True
        )
        return posts[:limit]

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post
