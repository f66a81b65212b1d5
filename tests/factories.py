"""Builders for domain objects used across tests."""

from datetime import datetime, timedelta
from uuid import uuid4

from forum.domain.model import Author, CommentComment, Post, PostComment
from forum.domain.value import CommentId, PostId, UserId

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def at(minutes: int) -> datetime:
    """A fixed timestamp offset from BASE_TIME, for deterministic ordering."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_author(
    user_id: str | None = None,
    username: str | None = "alice",
    first_name: str | None = None,
    last_name: str | None = None,
) -> Author:
    return Author(
        id=UserId(user_id or f"user_{uuid4().hex[:12]}"),
        username=username,
        image_url="https://img.example.com/avatar.png",
        first_name=first_name,
        last_name=last_name,
    )


def make_post(author_id: UserId, minutes: int = 0, title: str = "Hello") -> Post:
    return Post(
        id=PostId(uuid4()),
        author_id=author_id,
        title=title,
        content="First post body",
        created_at=at(minutes),
    )


def make_comment(
    post_id: PostId, author_id: UserId, minutes: int = 0, content: str = "Nice"
) -> PostComment:
    return PostComment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id,
        content=content,
        created_at=at(minutes),
    )


def make_reply(
    parent: PostComment | CommentComment,
    author_id: UserId,
    minutes: int = 0,
    content: str = "Agreed",
) -> CommentComment:
    return CommentComment(
        id=CommentId(uuid4()),
        post_id=parent.post_id,
        parent_id=parent.id,
        author_id=author_id,
        content=content,
        created_at=at(minutes),
    )
