"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from natter.config import Settings
from natter.domain.repository import CommentRepository
from natter.persistence.database import Database, create_engine
from natter.persistence.repository import SqlCommentRepository
from natter.util.di.base import ProviderBase
from natter.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using the configured SQL database."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_database(self, settings: Settings) -> AsyncIterator[Database]:
        """Provide the shared database handle.

        An unset database URL yields a handle whose every operation raises
        StoreUnavailableError.
        """
        engine = create_engine(settings)
        if engine is not None:
            # Instrument SQLAlchemy for observability
            instrument_sqlalchemy(engine)
        database = Database(engine)
        yield database
        await database.dispose()

    @provide(scope=Scope.APP)
    def get_comment_repository(self, database: Database) -> CommentRepository:
        """Provide Comment repository."""
        return SqlCommentRepository(database)
