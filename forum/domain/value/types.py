"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from forum.domain.value.common import ValueObject

# Content bounds shared by models and migrations
POST_TITLE_MAX_LENGTH = 180
POST_CONTENT_MAX_LENGTH = 360
COMMENT_CONTENT_MAX_LENGTH = 360


class VoteDirection(str, Enum):
    """Direction of a vote.

    A user holds at most one vote per item; casting the other direction
    replaces it.
    """

    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "VoteDirection":
        """The direction a vote in this direction displaces."""
        return VoteDirection.DOWN if self is VoteDirection.UP else VoteDirection.UP


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    COMMENT = "comment"


class CommentType(str, Enum):
    """Kind of parent a comment hangs off.

    POST for top-level comments, COMMENT for replies.
    """

    POST = "post"
    COMMENT = "comment"


class VoteProjection(ValueObject):
    """A votable's rating and the requesting user's vote state."""

    rating: int
    up_vote: bool = False
    down_vote: bool = False
