"""Identity provider HTTP client.

User records live at an external identity provider. Only the public
profile fields are read: id, username, image_url, first_name, last_name.
Everything else the provider returns (emails, metadata) is dropped here.
"""

from typing import Any, Sequence

import httpx
import logfire

from forum.adapter.error import ProviderError
from forum.domain.model.author import Author
from forum.domain.service.author_service import IdentityClient
from forum.domain.value import UserId


class IdentityClientError(ProviderError):
    """Identity provider request failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__("identity", message, status_code)


def _to_author(record: dict[str, Any]) -> Author:
    return Author(
        id=UserId(str(record["id"])),
        username=record.get("username"),
        image_url=record.get("image_url") or "",
        first_name=record.get("first_name"),
        last_name=record.get("last_name"),
    )


class RealIdentityClient(IdentityClient):
    """Identity provider client backed by its REST API.

    Endpoints:
        GET {base_url}/users/{user_id}
        GET {base_url}/users?user_id=a&user_id=b&limit=100
    """

    def __init__(self, base_url: str, secret_key: str, timeout: float = 10.0) -> None:
        """Initialize identity client.

        Args:
            base_url: Identity provider API root
            secret_key: Backend API key sent as a bearer token
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.secret_key = secret_key
        self.timeout = timeout

    @property
    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.secret_key}"}

    async def get_user(self, user_id: UserId) -> Author | None:
        """Fetch one user's public profile.

        Raises:
            IdentityClientError: If the provider request fails
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.base_url}/users/{user_id}",
                    headers=self._headers,
                    timeout=self.timeout,
                )

                if response.status_code == 404:
                    return None

                if response.status_code != 200:
                    logfire.error(
                        "Identity user request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise IdentityClientError(
                        "user request failed", status_code=response.status_code
                    )

                return _to_author(response.json())

        except httpx.HTTPError as e:
            logfire.error("Identity user HTTP error", error=str(e))
            raise IdentityClientError(f"HTTP error fetching user: {e}") from e

    async def get_user_list(
        self, user_ids: Sequence[UserId], limit: int
    ) -> list[Author]:
        """Fetch public profiles for many users in one request.

        Raises:
            IdentityClientError: If the provider request fails
        """
        if not user_ids:
            return []

        params: list[tuple[str, str | int]] = [("user_id", uid) for uid in user_ids]
        params.append(("limit", limit))

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.base_url}/users",
                    params=params,
                    headers=self._headers,
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Identity user list request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise IdentityClientError(
                        "user list request failed",
                        status_code=response.status_code,
                    )

                records = response.json()
                logfire.info(
                    "Identity users fetched",
                    requested=len(user_ids),
                    returned=len(records),
                )
                return [_to_author(record) for record in records]

        except httpx.HTTPError as e:
            logfire.error("Identity user list HTTP error", error=str(e))
            raise IdentityClientError(f"HTTP error fetching user list: {e}") from e


class MockIdentityClient(IdentityClient):
    """In-memory identity provider for testing.

    Honors the page limit like the real provider, so tests can exercise
    truncated lookups.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, Author] = {}

    def add_user(self, author: Author) -> Author:
        """Register a user with the fake provider."""
        self._users[author.id] = author
        return author

    async def get_user(self, user_id: UserId) -> Author | None:
        """Return the registered user, if any."""
        return self._users.get(user_id)

    async def get_user_list(
        self, user_ids: Sequence[UserId], limit: int
    ) -> list[Author]:
        """Return registered users among the requested IDs, up to limit."""
        found = [self._users[uid] for uid in user_ids if uid in self._users]
        return found[:limit]
