"""Domain value objects for the forum."""

from forum.domain.value.identifiers import CommentId, PostId, UserId, VoteId
from forum.domain.value.types import (
    COMMENT_CONTENT_MAX_LENGTH,
    POST_CONTENT_MAX_LENGTH,
    POST_TITLE_MAX_LENGTH,
    CommentType,
    VotableType,
    VoteDirection,
    VoteProjection,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "VoteId",
    # Types
    "CommentType",
    "VotableType",
    "VoteDirection",
    "VoteProjection",
    # Limits
    "COMMENT_CONTENT_MAX_LENGTH",
    "POST_CONTENT_MAX_LENGTH",
    "POST_TITLE_MAX_LENGTH",
]
