"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.post import Post
from forum.domain.value import PostId


class PostRepository(ABC):
    """Storage for posts.

    Posts are append-only: there is no update or delete.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """The post with this ID, None if it was never created."""
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100) -> List[Post]:
        """The newest posts, at most limit of them.

        Returns:
            Posts by created_at descending, ties by ID descending
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post and return it."""
        pass
