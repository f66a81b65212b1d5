"""Domain model entities for the forum."""

from forum.domain.model.author import Author
from forum.domain.model.comment import (
    BaseComment,
    Comment,
    CommentComment,
    PostComment,
)
from forum.domain.model.post import Post
from forum.domain.model.vote import Vote, VoteLedger

__all__ = [
    "Author",
    "BaseComment",
    "Comment",
    "CommentComment",
    "Post",
    "PostComment",
    "Vote",
    "VoteLedger",
]
