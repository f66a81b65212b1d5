"""Create reply use case."""

from pydantic import BaseModel

from forum.application.usecase.common import parse_id, require_user
from forum.domain.service import (
    AuthorService,
    CommentNode,
    CommentService,
    PostService,
)
from forum.domain.value import CommentId, PostId

from .get_comments import CommentItem


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    post_id: str  # UUID string
    comment_id: str  # Comment being replied to
    content: str
    user_id: str | None = None  # Author, from the authenticated caller


class CreateReplyResponse(CommentItem):
    """The new reply as a tree node."""

    pass


class CreateReplyUseCase:
    """Use case for replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        author_service: AuthorService,
    ) -> None:
        """Initialize create reply use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            author_service: Author resolution service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.author_service = author_service

    async def execute(self, request: CreateReplyRequest) -> CreateReplyResponse:
        """Execute create reply flow.

        Raises:
            AuthRequiredError: If caller is anonymous
            NotFoundError: If the post or the parent comment is missing, or the
                parent belongs to another post
            ValidationError: If content is out of bounds
            AuthorNotFoundError: If the caller has no usable profile
        """
        author_id = require_user(request.user_id, "reply")
        post_id = PostId(parse_id(request.post_id, "Post"))
        parent_id = CommentId(parse_id(request.comment_id, "Comment"))

        await self.post_service.get_post(post_id)
        author = await self.author_service.get_author(author_id)

        reply = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=author_id,
            content=request.content,
            parent_id=parent_id,
        )

        item = CommentItem.from_node(CommentNode.create(reply, author))
        return CreateReplyResponse(comment=item.comment, author=item.author)
