"""Strongly typed identifiers for forum domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Entities owned by this service
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)

# Users live in the external identity provider, which issues opaque string ids
UserId = NewType("UserId", str)
