"""Comment domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
import pydantic

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model.comment import Comment, CommentComment, PostComment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a top-level comment or a reply.

        The caller is responsible for checking that the post exists.

        Args:
            post_id: Post the comment belongs to
            author_id: Author user ID
            content: Comment text (1-360 characters)
            parent_id: Comment being replied to, None for a top-level comment

        Returns:
            Created comment (PostComment or CommentComment)

        Raises:
            NotFoundError: If the parent is missing or belongs to another post
            ValidationError: If content is out of bounds
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent or parent.post_id != post_id:
                    logfire.warn(
                        "Reply to unknown comment",
                        post_id=str(post_id),
                        parent_id=str(parent_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))

            comment_id = CommentId(uuid4())
            now = datetime.now()
            try:
                comment: Comment
                if parent_id is None:
                    comment = PostComment(
                        id=comment_id,
                        post_id=post_id,
                        author_id=author_id,
                        content=content,
                        created_at=now,
                    )
                else:
                    comment = CommentComment(
                        id=comment_id,
                        post_id=post_id,
                        parent_id=parent_id,
                        author_id=author_id,
                        content=content,
                        created_at=now,
                    )
            except pydantic.ValidationError as e:
                error = ValidationError.from_pydantic(e)
                logfire.warn(
                    "Comment rejected", field=error.field, reason=error.message
                )
                raise error

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                comment_type=saved.comment_type.value,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Get a comment of either variant by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        return await self.comment_repository.find_by_id(comment_id)

    async def get_thread(
        self, post_id: PostId
    ) -> tuple[list[PostComment], list[CommentComment]]:
        """Load every comment on a post, split by variant.

        Args:
            post_id: Post ID

        Returns:
            Tuple of (top-level comments, replies at any depth), each in
            creation order
        """
        with logfire.span("comment_service.get_thread", post_id=str(post_id)):
            # Sequential: both use the request session, and AsyncSession does not
            # allow concurrent queries. Running them in parallel needs a second
            # session outside the request transaction.
            top_level = await self.comment_repository.find_top_level(post_id)
            replies = await self.comment_repository.find_replies(post_id)
            logfire.info(
                "Thread loaded",
                post_id=str(post_id),
                top_level=len(top_level),
                replies=len(replies),
            )
            return top_level, replies
