"""Comment entities.

Comments are threaded discussions on posts with unlimited depth. A comment
is one of two variants, discriminated by ``comment_type``:

- PostComment: hangs directly off the post (top-level)
- CommentComment: a reply to another comment

Both carry the owning post id so a whole thread can be loaded by post.
"""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import (
    COMMENT_CONTENT_MAX_LENGTH,
    CommentId,
    CommentType,
    PostId,
    UserId,
)


class BaseComment(DomainModel):
    """Fields shared by both comment variants."""

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=COMMENT_CONTENT_MAX_LENGTH)
    created_at: datetime = Field(default_factory=datetime.now)


class PostComment(BaseComment):
    """Top-level comment on a post."""

    comment_type: Literal[CommentType.POST] = CommentType.POST
    parent_id: None = None


class CommentComment(BaseComment):
    """Reply to another comment on the same post."""

    comment_type: Literal[CommentType.COMMENT] = CommentType.COMMENT
    parent_id: CommentId


Comment = Annotated[
    Union[PostComment, CommentComment], Field(discriminator="comment_type")
]
