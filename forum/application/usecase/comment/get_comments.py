"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.application.usecase.common import AuthorItem, parse_id
from forum.domain.service import CommentNode, CommentTreeService, PostService
from forum.domain.value import CommentType, PostId, UserId


class CommentData(BaseModel):
    """Comment fields, vote state and nested replies."""

    comment_id: str
    post_id: str
    parent_id: str | None
    author_id: str
    content: str
    created_at: datetime
    rating: int
    up_vote: bool
    down_vote: bool
    comment_type: CommentType
    comments: list["CommentItem"]


class CommentItem(BaseModel):
    """Comment paired with its author."""

    comment: CommentData
    author: AuthorItem

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentItem":
        comment = node.comment
        return cls(
            comment=CommentData(
                comment_id=str(comment.id),
                post_id=str(comment.post_id),
                parent_id=str(comment.parent_id) if comment.parent_id else None,
                author_id=comment.author_id,
                content=comment.content,
                created_at=comment.created_at,
                rating=node.rating,
                up_vote=node.up_vote,
                down_vote=node.down_vote,
                comment_type=node.comment_type,
                comments=[cls.from_node(child) for child in node.comments],
            ),
            author=AuthorItem.from_author(node.author),
        )


CommentData.model_rebuild()


def _count(nodes: list[CommentNode]) -> int:
    return sum(1 + _count(node.comments) for node in nodes)


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentItem]
    total: int  # Every comment in the thread, at any depth


class GetCommentsUseCase:
    """Use case for getting a post's comment tree."""

    def __init__(
        self,
        post_service: PostService,
        comment_tree_service: CommentTreeService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            post_service: Post domain service
            comment_tree_service: Comment tree assembler
        """
        self.post_service = post_service
        self.comment_tree_service = comment_tree_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Post ID and optional requesting user

        Returns:
            Top-level comments in creation order, each with nested replies

        Raises:
            NotFoundError: If post not found
            AuthorNotFoundError: If any comment author cannot be resolved
        """
        post_id = PostId(parse_id(request.post_id, "Post"))
        await self.post_service.get_post(post_id)

        tree = await self.comment_tree_service.build_tree(
            post_id, UserId(request.user_id) if request.user_id else None
        )

        return GetCommentsResponse(
            post_id=str(post_id),
            comments=[CommentItem.from_node(node) for node in tree],
            total=_count(tree),
        )
