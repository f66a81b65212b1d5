"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Post
from forum.domain.repository import PostRepository
from forum.domain.value import PostId
from forum.persistence.mappers import post_to_dict, row_to_post
from forum.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_all(self, limit: int = 100) -> List[Post]:
        """Find the most recent posts, newest first."""
        stmt = (
            select(posts_table)
            .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a new post."""
        stmt = insert(posts_table).values(**post_to_dict(post))
        await self.session.execute(stmt)
        await self.session.flush()
        return post
