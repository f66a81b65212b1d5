"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Comment, CommentComment, PostComment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, PostId
from forum.persistence.mappers import comment_to_dict, row_to_comment
from forum.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(self, post_id: PostId) -> List[PostComment]:
        """Find comments hanging directly off the post."""
        stmt = (
            select(comments_table)
            .where(
                and_(
                    comments_table.c.post_id == post_id,
                    comments_table.c.parent_id.is_(None),
                )
            )
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]  # type: ignore[misc]

    async def find_replies(self, post_id: PostId) -> List[CommentComment]:
        """Find every reply in the post's thread."""
        stmt = (
            select(comments_table)
            .where(
                and_(
                    comments_table.c.post_id == post_id,
                    comments_table.c.parent_id.is_not(None),
                )
            )
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]  # type: ignore[misc]

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
