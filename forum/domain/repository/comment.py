"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.comment import Comment, CommentComment, PostComment
from forum.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for both comment variants.

    Top-level comments and replies are fetched separately, both keyed by
    the owning post, so a full thread costs two queries at any depth.
    Results are ordered by created_at ascending, ties broken by id.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment of either variant by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(self, post_id: PostId) -> List[PostComment]:
        """Find comments whose parent is the post itself.

        Args:
            post_id: The post ID

        Returns:
            Top-level comments in creation order
        """
        pass

    @abstractmethod
    async def find_replies(self, post_id: PostId) -> List[CommentComment]:
        """Find every reply in the post's thread, at any depth.

        Args:
            post_id: The owning post ID

        Returns:
            Replies in creation order
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
