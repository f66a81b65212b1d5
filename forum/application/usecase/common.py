"""Response models and helpers shared by use cases."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.error import AuthRequiredError, NotFoundError
from forum.domain.model import Author
from forum.domain.value import UserId


class AuthorItem(BaseModel):
    """Public author fields shown next to posts and comments."""

    id: str
    username: str | None
    image_url: str
    first_name: str | None
    last_name: str | None
    display_name: str

    @classmethod
    def from_author(cls, author: Author) -> "AuthorItem":
        return cls(
            id=author.id,
            username=author.username,
            image_url=author.image_url,
            first_name=author.first_name,
            last_name=author.last_name,
            display_name=author.display_name,
        )


def parse_id(value: str, resource: str) -> UUID:
    """Parse a path identifier; a malformed ID can't name anything.

    Raises:
        NotFoundError: If value is not a UUID
    """
    try:
        return UUID(value)
    except ValueError:
        raise NotFoundError(resource, value)


def require_user(user_id: str | None, action: str) -> UserId:
    """Return the caller's ID or fail for anonymous callers.

    Raises:
        AuthRequiredError: If user_id is None
    """
    if not user_id:
        raise AuthRequiredError(action)
    return UserId(user_id)
