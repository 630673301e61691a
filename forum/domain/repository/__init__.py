"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from forum.domain.repository.comment import CommentRepository
from forum.domain.repository.interaction import InteractionRepository
from forum.domain.repository.topic import TopicRepository

__all__ = [
    "TopicRepository",
    "CommentRepository",
    "InteractionRepository",
]
