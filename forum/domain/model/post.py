"""Post aggregate root.

Posts are the top of every discussion: a short title and body that
comments and votes attach to.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import (
    POST_CONTENT_MAX_LENGTH,
    POST_TITLE_MAX_LENGTH,
    PostId,
    UserId,
)


class Post(DomainModel):
    """Post aggregate root.

    Posts are never edited or deleted once created; only their vote
    ledger changes.
    """

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=POST_TITLE_MAX_LENGTH)
    content: str = Field(min_length=1, max_length=POST_CONTENT_MAX_LENGTH)
    created_at: datetime = Field(default_factory=datetime.now)
