"""SQLAlchemy table definitions for the forum.

They match the schema defined in Alembic migrations. Author and voter IDs
belong to the external identity provider, so they are plain strings with
no foreign key.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from forum.domain.value import (
    COMMENT_CONTENT_MAX_LENGTH,
    POST_CONTENT_MAX_LENGTH,
    POST_TITLE_MAX_LENGTH,
)

metadata = MetaData()


def _id_column() -> Column:
    return Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()")


def _created_at_column() -> Column:
    return Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    )


# Posts
posts_table = Table(
    "posts",
    metadata,
    _id_column(),
    Column("author_id", String(255), nullable=False),
    Column("title", String(POST_TITLE_MAX_LENGTH), nullable=False),
    Column("content", String(POST_CONTENT_MAX_LENGTH), nullable=False),
    _created_at_column(),
    CheckConstraint("char_length(title) >= 1", name="post_title_not_empty"),
    CheckConstraint("char_length(content) >= 1", name="post_content_not_empty"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)

# Comments: both variants, parent_id is NULL for top-level comments
comments_table = Table(
    "comments",
    metadata,
    _id_column(),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "comment_type",
        Enum("post", "comment", name="comment_type", create_type=False),
        nullable=False,
    ),
    Column("author_id", String(255), nullable=False),
    Column("content", String(COMMENT_CONTENT_MAX_LENGTH), nullable=False),
    _created_at_column(),
    CheckConstraint("char_length(content) >= 1", name="comment_content_not_empty"),
    CheckConstraint(
        "(comment_type = 'post' AND parent_id IS NULL)"
        " OR (comment_type = 'comment' AND parent_id IS NOT NULL)",
        name="comment_parent_matches_type",
    ),
)

Index(
    "idx_comments_post_id_created_at",
    comments_table.c.post_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# Votes
votes_table = Table(
    "votes",
    metadata,
    _id_column(),
    Column("user_id", String(255), nullable=False),
    Column(
        "votable_type",
        Enum("post", "comment", name="votable_type", create_type=False),
        nullable=False,
    ),
    Column("votable_id", UUID, nullable=False),
    Column(
        "direction",
        Enum("up", "down", name="vote_direction", create_type=False),
        nullable=False,
    ),
    _created_at_column(),
    # One vote per user per item: up and down can never coexist
    UniqueConstraint("user_id", "votable_type", "votable_id", name="unique_vote"),
)

Index("idx_votes_votable", votes_table.c.votable_type, votes_table.c.votable_id)
