"""initial_schema

Create the forum schema:
- Posts (title and body, authored by an identity provider user)
- Comments (top-level or reply, unlimited depth via self-reference)
- Votes (up/down, at most one per user per item)

Revision ID: 3c1f7a9d2e40
Revises:
Create Date: 2026-10-19 10:12:04.518223

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f7a9d2e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE votable_type AS ENUM ('post', 'comment');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE vote_direction AS ENUM ('up', 'down');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE comment_type AS ENUM ('post', 'comment');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column("title", sa.String(180), nullable=False),
        sa.Column("content", sa.String(360), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("char_length(title) >= 1", name="post_title_not_empty"),
        sa.CheckConstraint("char_length(content) >= 1", name="post_content_not_empty"),
    )
    op.create_index("idx_posts_created_at", "posts", [sa.text("created_at DESC")])
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column(
            "comment_type",
            postgresql.ENUM("post", "comment", name="comment_type", create_type=False),
            nullable=False,
        ),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column("content", sa.String(360), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(content) >= 1", name="comment_content_not_empty"
        ),
        sa.CheckConstraint(
            "(comment_type = 'post' AND parent_id IS NULL)"
            " OR (comment_type = 'comment' AND parent_id IS NOT NULL)",
            name="comment_parent_matches_type",
        ),
    )
    op.create_index(
        "idx_comments_post_id_created_at", "comments", ["post_id", "created_at"]
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column(
            "votable_type",
            postgresql.ENUM("post", "comment", name="votable_type", create_type=False),
            nullable=False,
        ),
        sa.Column("votable_id", sa.UUID(), nullable=False),
        sa.Column(
            "direction",
            postgresql.ENUM("up", "down", name="vote_direction", create_type=False),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        # One row per user per item, so up and down can never coexist
        sa.UniqueConstraint(
            "user_id", "votable_type", "votable_id", name="unique_vote"
        ),
    )
    op.create_index("idx_votes_votable", "votes", ["votable_type", "votable_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("votes")
    op.drop_table("comments")
    op.drop_table("posts")

    op.execute("DROP TYPE IF EXISTS comment_type")
    op.execute("DROP TYPE IF EXISTS vote_direction")
    op.execute("DROP TYPE IF EXISTS votable_type")
