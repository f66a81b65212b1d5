"""Get post use case."""

from pydantic import BaseModel

from forum.application.usecase.common import parse_id
from forum.domain.service import AuthorService, PostService, VoteService
from forum.domain.value import PostId, UserId, VotableType

from .list_posts import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetPostResponse(PostItem):
    """Get post response."""

    pass


class GetPostUseCase:
    """Use case for retrieving one post with its author and vote state."""

    def __init__(
        self,
        post_service: PostService,
        vote_service: VoteService,
        author_service: AuthorService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            vote_service: Vote domain service
            author_service: Author resolution service
        """
        self.post_service = post_service
        self.vote_service = vote_service
        self.author_service = author_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If post not found
            AuthorNotFoundError: If the author cannot be resolved
        """
        post_id = PostId(parse_id(request.post_id, "Post"))
        post = await self.post_service.get_post(post_id)

        author = await self.author_service.get_author(post.author_id)
        projection = await self.vote_service.get_projection(
            VotableType.POST,
            post.id,
            UserId(request.user_id) if request.user_id else None,
        )

        item = PostItem.build(post, author, projection)
        return GetPostResponse(post=item.post, author=item.author)
