"""Enumerated domain values for the forum.

Wire values for targets and interactions are upper-case to match what
clients already send (``"TOPIC"``, ``"VOTE_UP"``); sort orders are
lower-case query-string values.
"""

from enum import Enum
from uuid import UUID

from forum.domain.error import ValidationError


class _ParseableEnum(str, Enum):
    """String enum that rejects unknown values with a domain error."""

    @classmethod
    def parse(cls, value: "str | _ParseableEnum") -> "_ParseableEnum":
        """Convert a raw value into an enum member.

        Raises:
            ValidationError: If the value is not a member of the enum
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise ValidationError(
                f"Invalid {cls.__name__} '{value}', expected one of: {allowed}"
            )


class TargetType(_ParseableEnum):
    """Type of entity that can receive reactions."""

    TOPIC = "TOPIC"
    COMMENT = "COMMENT"


class InteractionType(_ParseableEnum):
    """Kind of reaction a user can hold on a target."""

    VOTE_UP = "VOTE_UP"
    VOTE_DOWN = "VOTE_DOWN"
    HEART = "HEART"

    @property
    def base_value(self) -> int:
        """Contribution of this reaction to a target's net score."""
        return _BASE_VALUES[self]

    @property
    def is_vote(self) -> bool:
        """Whether this reaction counts towards total_votes."""
        return self in (InteractionType.VOTE_UP, InteractionType.VOTE_DOWN)


_BASE_VALUES = {
    InteractionType.VOTE_UP: 1,
    InteractionType.VOTE_DOWN: -1,
    InteractionType.HEART: 0,
}


class CommentSortOrder(_ParseableEnum):
    """Sort order for comment listings."""

    NEW = "new"  # created_at DESC
    TOP = "top"  # net_score DESC
    CONTROVERSIAL = "controversial"  # many votes, score near neutral


class TopicSortOrder(_ParseableEnum):
    """Sort order for the topic feed."""

    HOT = "hot"  # Time-decayed popularity
    NEW = "new"  # created_at DESC
    TOP = "top"  # net_score DESC


def parse_uuid(value: "str | UUID", field: str) -> UUID:
    """Parse a UUID from request input.

    Args:
        value: Raw identifier
        field: Field name for the error message

    Raises:
        ValidationError: If the value is not a valid UUID
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        raise ValidationError(f"Invalid {field}: '{value}' is not a valid UUID")
