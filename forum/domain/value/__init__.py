"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    CommentId,
    InteractionId,
    TopicId,
    UserId,
)
from forum.domain.value.reaction import ReactionOutcome
from forum.domain.value.types import (
    CommentSortOrder,
    InteractionType,
    TargetType,
    TopicSortOrder,
    parse_uuid,
)

__all__ = [
    # Identifiers
    "TopicId",
    "CommentId",
    "InteractionId",
    "UserId",
    # Types
    "TargetType",
    "InteractionType",
    "CommentSortOrder",
    "TopicSortOrder",
    "ReactionOutcome",
    "parse_uuid",
]
