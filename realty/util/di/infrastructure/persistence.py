"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from realty.config import Settings, TaggingSettings
from realty.domain.repository import (
    AssociationRepository,
    ContentRepository,
    DetailFetcherRegistry,
    TagRepository,
)
from realty.persistence.database import create_engine, create_session_factory
from realty.persistence.repository import (
    PostgresAssociationRepository,
    PostgresContentRepository,
    PostgresTagRepository,
)
from realty.util.di.base import ProviderBase
from realty.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the app container closes."""
        engine = create_engine(settings)
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
        """Provide database session for request scope.

        Engine operations only read; the session is rolled back on error and
        closed at the end of the request.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, session: AsyncSession) -> TagRepository:
        """Provide tag catalog repository."""
        return PostgresTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_association_repository(
        self, session: AsyncSession, tagging: TaggingSettings
    ) -> AssociationRepository:
        """Provide association repository."""
        return PostgresAssociationRepository(
            session, listing_available_status=tagging.listing_available_status
        )

    @provide(scope=Scope.APP)
    def get_content_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> ContentRepository:
        """Provide content detail repository."""
        return PostgresContentRepository(session_factory)

    @provide(scope=Scope.APP)
    def get_detail_fetchers(
        self, content_repository: ContentRepository
    ) -> DetailFetcherRegistry:
        """Provide detail fetchers for every content kind."""
        return content_repository.as_registry()
