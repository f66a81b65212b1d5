"""Author projection.

Authors are not stored by this service: they are the subset of an identity
provider user record that is safe to show next to a post or comment.
"""

from typing import Optional

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId


class Author(DomainModel):
    """Public profile of a post or comment author."""

    id: UserId
    username: Optional[str] = None
    image_url: str = ""
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def is_identifiable(self) -> bool:
        """An author must have at least a username or a first name."""
        return bool(self.username or self.first_name)

    @property
    def display_name(self) -> str:
        """Username if set, otherwise "first last"."""
        if self.username:
            return self.username
        return f"{self.first_name or ''} {self.last_name or ''}".strip()
