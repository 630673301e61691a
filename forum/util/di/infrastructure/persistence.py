"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import RankingSettings, Settings
from forum.domain.repository import (
    CommentRepository,
    InteractionRepository,
    TopicRepository,
)
from forum.persistence.database import (
    create_engine,
    create_session_factory,
    unit_of_work,
)
from forum.persistence.repository import (
    PostgresCommentRepository,
    PostgresInteractionRepository,
    PostgresTopicRepository,
)
from forum.persistence.transaction import SessionTransaction, Transaction
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide the request's unit of work.

        Committed when the request completes, rolled back if it raises.
        """
        async with unit_of_work(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_transaction(self, session: AsyncSession) -> Transaction:
        """Provide the rollback handle of the request transaction."""
        return SessionTransaction(session)

    @provide(scope=Scope.REQUEST)
    def get_topic_repository(
        self, session: AsyncSession, ranking: RankingSettings
    ) -> TopicRepository:
        """Provide Topic repository."""
        return PostgresTopicRepository(session, ranking)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_interaction_repository(
        self, session: AsyncSession
    ) -> InteractionRepository:
        """Provide Interaction repository."""
        return PostgresInteractionRepository(session)
