"""PostgreSQL repository implementations."""

from forum.persistence.repository.comment import PostgresCommentRepository
from forum.persistence.repository.interaction import PostgresInteractionRepository
from forum.persistence.repository.topic import PostgresTopicRepository

__all__ = [
    "PostgresTopicRepository",
    "PostgresCommentRepository",
    "PostgresInteractionRepository",
]
