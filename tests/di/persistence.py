"""Mock persistence providers for testing."""

from dishka import Scope, provide

from forum.domain.repository import (
    CommentRepository,
    InteractionRepository,
    TopicRepository,
)
from forum.domain.service import FeedRanker
from forum.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryInteractionRepository,
    InMemoryTopicRepository,
    InMemoryTransaction,
)
from forum.persistence.transaction import Transaction
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across requests of one
    container (needed by API tests). Every test builds its own container,
    which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_topic_repository(self, ranker: FeedRanker) -> TopicRepository:
        """Provide in-memory topic repository."""
        return InMemoryTopicRepository(ranker)

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_interaction_repository(self) -> InteractionRepository:
        """Provide in-memory interaction repository."""
        return InMemoryInteractionRepository()

    @provide(scope=Scope.APP)
    def get_transaction(self) -> Transaction:
        """Provide in-memory transaction that counts rollbacks."""
        return InMemoryTransaction()
