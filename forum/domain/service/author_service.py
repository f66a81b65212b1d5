"""Author resolution against the external identity provider."""

from typing import Iterable, Sequence

import logfire

from forum.domain.error import AuthorNotFoundError
from forum.domain.model.author import Author
from forum.domain.value import UserId

from .base import Service


class IdentityClient:
    """Identity provider client interface.

    The provider owns user records; this service only reads the public
    profile fields of the users who authored posts and comments.
    """

    async def get_user(self, user_id: UserId) -> Author | None:
        """Fetch one user's public profile.

        Args:
            user_id: User ID at the identity provider

        Returns:
            Author projection, None if the provider has no such user
        """
        raise NotImplementedError

    async def get_user_list(
        self, user_ids: Sequence[UserId], limit: int
    ) -> list[Author]:
        """Fetch public profiles for many users in one call.

        Args:
            user_ids: User IDs to look up
            limit: Maximum number of records the provider returns

        Returns:
            Author projections for the users the provider knows, in no
            particular order
        """
        raise NotImplementedError


class AuthorService(Service):
    """Domain service that turns author IDs into displayable authors.

    Every author referenced by content must resolve to an identifiable
    record (username or first name). A miss is a data integrity failure,
    not a missing resource.
    """

    def __init__(self, identity_client: IdentityClient, page_limit: int = 100) -> None:
        """Initialize author service.

        Args:
            identity_client: Identity provider client
            page_limit: Maximum users fetched per batch lookup
        """
        self.identity_client = identity_client
        self.page_limit = page_limit

    async def resolve_authors(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, Author]:
        """Resolve many author IDs with a single provider call.

        Args:
            user_ids: Author IDs (duplicates allowed)

        Returns:
            Dict mapping each distinct ID to its author

        Raises:
            AuthorNotFoundError: If any ID is unknown or not identifiable
        """
        distinct = list(dict.fromkeys(user_ids))
        if not distinct:
            return {}

        with logfire.span("author_service.resolve_authors", count=len(distinct)):
            if len(distinct) > self.page_limit:
                logfire.warn(
                    "Author lookup exceeds provider page limit",
                    requested=len(distinct),
                    limit=self.page_limit,
                )

            records = await self.identity_client.get_user_list(
                distinct, limit=self.page_limit
            )
            by_id = {author.id: author for author in records}

            authors: dict[UserId, Author] = {}
            for user_id in distinct:
                authors[user_id] = self._require_identifiable(
                    user_id, by_id.get(user_id)
                )

            logfire.info("Authors resolved", count=len(authors))
            return authors

    async def get_author(self, user_id: UserId) -> Author:
        """Resolve a single author.

        Raises:
            AuthorNotFoundError: If the ID is unknown or not identifiable
        """
        with logfire.span("author_service.get_author", user_id=user_id):
            author = await self.identity_client.get_user(user_id)
            return self._require_identifiable(user_id, author)

    def _require_identifiable(self, user_id: UserId, author: Author | None) -> Author:
        if author is None or not author.is_identifiable:
            logfire.error(
                "Author not found",
                user_id=user_id,
                known=author is not None,
            )
            raise AuthorNotFoundError(user_id)
        return author
