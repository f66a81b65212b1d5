"""Create comment use case."""

from pydantic import BaseModel

from forum.application.usecase.common import parse_id, require_user
from forum.domain.service import (
    AuthorService,
    CommentNode,
    CommentService,
    PostService,
)
from forum.domain.value import PostId

from .get_comments import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    user_id: str | None = None  # Author, from the authenticated caller


class CreateCommentResponse(CommentItem):
    """The new comment as a tree node, ready to append client-side."""

    pass


class CreateCommentUseCase:
    """Use case for commenting directly on a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        author_service: AuthorService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            author_service: Author resolution service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.author_service = author_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Require an authenticated caller
        2. Verify post exists via post service
        3. Resolve the caller's author, before anything is written
        4. Create the top-level comment

        Raises:
            AuthRequiredError: If caller is anonymous
            NotFoundError: If post not found
            ValidationError: If content is out of bounds
            AuthorNotFoundError: If the caller has no usable profile
        """
        author_id = require_user(request.user_id, "comment")
        post_id = PostId(parse_id(request.post_id, "Post"))

        await self.post_service.get_post(post_id)
        author = await self.author_service.get_author(author_id)

        comment = await self.comment_service.create_comment(
            post_id=post_id, author_id=author_id, content=request.content
        )

        item = CommentItem.from_node(CommentNode.create(comment, author))
        return CreateCommentResponse(comment=item.comment, author=item.author)
