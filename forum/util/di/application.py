"""Use case providers.

Use cases are wired from their constructor annotations; each request gets
its own instances on top of the request's services.
"""

from dishka import Scope, provide

from forum.application.usecase.comment import (
    CreateCommentUseCase,
    CreateReplyUseCase,
    GetCommentsUseCase,
)
from forum.application.usecase.post import (
    CreatePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from forum.application.usecase.vote import CastVoteUseCase
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases (not mockable)."""

    scope = Scope.REQUEST

    # Posts
    list_posts = provide(ListPostsUseCase)
    get_post = provide(GetPostUseCase)
    create_post = provide(CreatePostUseCase)

    # Comments
    get_comments = provide(GetCommentsUseCase)
    create_comment = provide(CreateCommentUseCase)
    create_reply = provide(CreateReplyUseCase)

    # Votes
    cast_vote = provide(CastVoteUseCase)
