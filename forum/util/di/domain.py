"""Domain service providers.

Services share the request's repositories, and through them its database
session and transaction.
"""

from dishka import Scope, provide

from forum.config import IdentitySettings
from forum.domain.service import (
    AuthorService,
    CommentService,
    CommentTreeService,
    IdentityClient,
    JWTService,
    PostService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services (not mockable)."""

    scope = Scope.REQUEST

    jwt_service = provide(JWTService)
    post_service = provide(PostService)
    comment_service = provide(CommentService)
    vote_service = provide(VoteService)
    comment_tree_service = provide(CommentTreeService)

    @provide
    def get_author_service(
        self, identity_client: IdentityClient, identity_settings: IdentitySettings
    ) -> AuthorService:
        """Author lookups are batched up to the provider's page size."""
        return AuthorService(
            identity_client=identity_client,
            page_limit=identity_settings.page_limit,
        )
