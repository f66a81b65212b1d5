"""In-memory comment repository for testing."""

from typing import Optional

from forum.domain.model.comment import Comment, CommentComment, PostComment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _ordered(self, post_id: PostId) -> list[Comment]:
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(self, post_id: PostId) -> list[PostComment]:
        """Find comments hanging directly off the post."""
        return [c for c in self._ordered(post_id) if isinstance(c, PostComment)]

    async def find_replies(self, post_id: PostId) -> list[CommentComment]:
        """Find every reply in the post's thread."""
        return [c for c in self._ordered(post_id) if isinstance(c, CommentComment)]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment
