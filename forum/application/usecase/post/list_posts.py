"""List posts use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from forum.application.usecase.common import AuthorItem
from forum.config import ListingSettings
from forum.domain.model import Author, Post
from forum.domain.service import AuthorService, PostService, VoteService
from forum.domain.value import UserId, VotableType, VoteProjection


class PostData(BaseModel):
    """Post fields with the caller's vote state."""

    post_id: str
    author_id: str
    title: str
    content: str
    created_at: datetime
    rating: int
    up_vote: bool
    down_vote: bool


class PostItem(BaseModel):
    """Post paired with its author."""

    post: PostData
    author: AuthorItem

    @classmethod
    def build(
        cls, post: Post, author: Author, projection: VoteProjection
    ) -> "PostItem":
        return cls(
            post=PostData(
                post_id=str(post.id),
                author_id=post.author_id,
                title=post.title,
                content=post.content,
                created_at=post.created_at,
                rating=projection.rating,
                up_vote=projection.up_vote,
                down_vote=projection.down_vote,
            ),
            author=AuthorItem.from_author(author),
        )


class ListPostsRequest(BaseModel):
    """List posts request."""

    user_id: str | None = None  # Current user ID (if authenticated)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total: int


class ListPostsUseCase:
    """Use case for the post feed: newest posts up to a fixed cap."""

    def __init__(
        self,
        post_service: PostService,
        vote_service: VoteService,
        author_service: AuthorService,
        listing_settings: ListingSettings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            vote_service: Vote domain service
            author_service: Author resolution service
            listing_settings: Feed size configuration
        """
        self.post_service = post_service
        self.vote_service = vote_service
        self.author_service = author_service
        self.listing_settings = listing_settings

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Authors and vote ledgers are loaded in one batch each.

        Raises:
            AuthorNotFoundError: If any post author cannot be resolved
        """
        limit = self.listing_settings.post_fetch_limit
        with logfire.span("list_posts.execute", limit=limit):
            posts = await self.post_service.list_recent(limit)
            if not posts:
                return ListPostsResponse(posts=[], total=0)

            authors = await self.author_service.resolve_authors(
                post.author_id for post in posts
            )
            ledgers = await self.vote_service.get_ledgers(
                VotableType.POST, [post.id for post in posts]
            )

            user_id = UserId(request.user_id) if request.user_id else None
            items = [
                PostItem.build(
                    post, authors[post.author_id], ledgers[post.id].project(user_id)
                )
                for post in posts
            ]

            logfire.info("Posts listed", count=len(items))
            return ListPostsResponse(posts=items, total=len(items))
