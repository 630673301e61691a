"""Strongly typed identifiers for forum domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

TopicId = NewType("TopicId", UUID)
CommentId = NewType("CommentId", UUID)
InteractionId = NewType("InteractionId", UUID)

# Opaque client-generated identifier; no identity verification happens here
UserId = NewType("UserId", UUID)
