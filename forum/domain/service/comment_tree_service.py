"""Comment tree assembly.

Turns the flat comment rows of one post into a nested tree annotated with
authors and vote state. Loading is batched: two comment queries, one vote
query and one identity lookup per tree, whatever its depth.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Optional

import logfire

from forum.domain.model.author import Author
from forum.domain.model.comment import Comment, CommentComment
from forum.domain.value import (
    CommentId,
    CommentType,
    PostId,
    UserId,
    VotableType,
    VoteProjection,
)

from .author_service import AuthorService
from .base import Service
from .comment_service import CommentService
from .vote_service import VoteService


@dataclass
class CommentNode:
    """A comment with its author, vote state and replies."""

    comment: Comment
    author: Author
    rating: int
    up_vote: bool
    down_vote: bool
    comments: list["CommentNode"] = field(default_factory=list)

    @property
    def comment_type(self) -> CommentType:
        return self.comment.comment_type

    @classmethod
    def create(
        cls,
        comment: Comment,
        author: Author,
        projection: Optional[VoteProjection] = None,
    ) -> "CommentNode":
        """Build a leaf node; a comment without a projection has no votes."""
        projection = projection or VoteProjection(rating=0)
        return cls(
            comment=comment,
            author=author,
            rating=projection.rating,
            up_vote=projection.up_vote,
            down_vote=projection.down_vote,
        )


class CommentTreeService(Service):
    """Domain service for building comment trees."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        author_service: AuthorService,
    ) -> None:
        """Initialize comment tree service.

        Args:
            comment_service: Comment domain service
            vote_service: Vote domain service
            author_service: Author resolution service
        """
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.author_service = author_service

    async def build_tree(
        self, post_id: PostId, user_id: Optional[UserId] = None
    ) -> list[CommentNode]:
        """Build the comment tree for a post.

        Siblings keep creation order. Replies whose parent is not part of
        the thread are unreachable and left out.

        Args:
            post_id: Post ID
            user_id: Requesting user for up_vote/down_vote flags, None if anonymous

        Returns:
            Top-level comment nodes, each carrying its nested replies

        Raises:
            AuthorNotFoundError: If any comment author cannot be resolved
        """
        with logfire.span("comment_tree_service.build_tree", post_id=str(post_id)):
            top_level, replies = await self.comment_service.get_thread(post_id)
            if not top_level:
                return []

            thread: list[Comment] = [*top_level, *replies]
            authors = await self.author_service.resolve_authors(
                comment.author_id for comment in thread
            )
            ledgers = await self.vote_service.get_ledgers(
                VotableType.COMMENT, [comment.id for comment in thread]
            )

            children: dict[CommentId, list[CommentComment]] = defaultdict(list)
            for reply in replies:
                children[reply.parent_id].append(reply)

            def build_node(comment: Comment) -> CommentNode:
                node = CommentNode.create(
                    comment,
                    authors[comment.author_id],
                    ledgers[comment.id].project(user_id),
                )
                node.comments = [
                    build_node(child) for child in children.get(comment.id, [])
                ]
                return node

            tree = [build_node(comment) for comment in top_level]
            logfire.info(
                "Comment tree built",
                post_id=str(post_id),
                top_level=len(top_level),
                total=len(thread),
            )
            return tree
