"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .interaction import InMemoryInteractionRepository
from .topic import InMemoryTopicRepository
from .transaction import InMemoryTransaction

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryInteractionRepository",
    "InMemoryTopicRepository",
    "InMemoryTransaction",
]
