"""Create post use case."""

from pydantic import BaseModel

from forum.application.usecase.common import require_user
from forum.domain.service import AuthorService, PostService
from forum.domain.value import VoteProjection

from .list_posts import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    user_id: str | None = None  # Author, from the authenticated caller


class CreatePostResponse(PostItem):
    """Create post response."""

    pass


class CreatePostUseCase:
    """Use case for creating a post."""

    def __init__(
        self, post_service: PostService, author_service: AuthorService
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            author_service: Author resolution service
        """
        self.post_service = post_service
        self.author_service = author_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Raises:
            AuthRequiredError: If caller is anonymous
            ValidationError: If title or content is out of bounds
            AuthorNotFoundError: If the caller has no usable profile
        """
        author_id = require_user(request.user_id, "create a post")

        # Resolve first so a caller without a profile leaves nothing behind
        author = await self.author_service.get_author(author_id)
        post = await self.post_service.create_post(
            author_id=author_id, title=request.title, content=request.content
        )

        # A new post has no votes yet
        item = PostItem.build(post, author, VoteProjection(rating=0))
        return CreatePostResponse(post=item.post, author=item.author)
