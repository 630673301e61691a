"""Interaction entity.

An interaction is a user's current reaction to a topic or comment.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from forum.domain.model.common import DomainModel, utcnow
from forum.domain.value import InteractionId, InteractionType, TargetType, UserId


class Interaction(DomainModel):
    """Interaction entity.

    Business rules:
    - At most one live row per (user_id, target_id, target_type), enforced
      by a storage uniqueness constraint
    - Repeating the stored reaction deletes the row (toggle-off)
    - Issuing a different reaction updates the row in place
    - Polymorphic reference to the target (topic or comment)
    """

    id: InteractionId
    user_id: UserId
    target_type: TargetType
    target_id: UUID  # TopicId or CommentId (both are UUIDs)
    interaction_type: InteractionType
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
