"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from quickblog.config import Settings
from quickblog.domain.repository import PostRepository
from quickblog.persistence.blob import BlobStore, SqlBlobStore
from quickblog.persistence.database import create_engine, create_session_factory
from quickblog.persistence.repository import BlobPostRepository
from quickblog.util.di.base import ProviderBase
from quickblog.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider: post blobs in a SQL table."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

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

        Blob writes commit themselves; whatever is left open is committed
        at the end of the request, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_blob_store(self, session: AsyncSession) -> BlobStore:
        """Provide SQL-backed blob store."""
        return SqlBlobStore(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: BlobStore) -> PostRepository:
        """Provide Post repository."""
        return BlobPostRepository(store)
