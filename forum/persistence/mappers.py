"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from forum.domain.model import Comment, CommentComment, Post, PostComment, Vote
from forum.domain.value import (
    CommentId,
    PostId,
    UserId,
    VotableType,
    VoteDirection,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(row["author_id"]),
        title=row["title"],
        content=row["content"],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to the matching Comment variant.

    Args:
        row: Database row as dict

    Returns:
        PostComment when the row has no parent, CommentComment otherwise
    """
    fields = {
        "id": CommentId(_uuid(row["id"])),
        "post_id": PostId(_uuid(row["post_id"])),
        "author_id": UserId(row["author_id"]),
        "content": row["content"],
        "created_at": row["created_at"],
    }
    if row.get("parent_id") is None:
        return PostComment(**fields)
    return CommentComment(parent_id=CommentId(_uuid(row["parent_id"])), **fields)


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    comment_dict = comment.model_dump()
    comment_dict["comment_type"] = comment.comment_type.value
    return comment_dict


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(row["user_id"]),
        votable_type=VotableType(row["votable_type"]),
        votable_id=_uuid(row["votable_id"]),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    vote_dict = vote.model_dump()
    vote_dict["votable_type"] = vote.votable_type.value
    vote_dict["direction"] = vote.direction.value
    return vote_dict
