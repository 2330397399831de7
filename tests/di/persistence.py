"""Mock persistence providers for testing."""

from dishka import Scope, provide

from natter.domain.repository import CommentRepository
from natter.persistence.database import Database
from natter.persistence.repository.inmemory import InMemoryCommentRepository
from natter.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using an in-memory repository.

    Uses APP scope so state survives across the requests of one test client;
    each test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> Database:
        """Provide an unprovisioned database handle (never touched)."""
        return Database(None)

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()
