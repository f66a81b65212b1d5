"""Persistence component: PostgreSQL in production."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import DatabaseSettings
from forum.domain.repository import (
    CommentRepository,
    PostRepository,
    VoteRepository,
)
from forum.persistence.database import create_engine, create_session_factory
from forum.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresVoteRepository,
)
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """One engine per process, one session and transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_engine(self, settings: DatabaseSettings) -> AsyncEngine:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Request transaction: committed on success, rolled back on error.

        Vote toggles open savepoints inside this transaction.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn(
                    "Request transaction rolled back",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        return PostgresVoteRepository(session)
