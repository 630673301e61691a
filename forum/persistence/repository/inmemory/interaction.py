"""In-memory interaction repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from forum.domain.error import ConflictError
from forum.domain.model.interaction import Interaction
from forum.domain.model.common import utcnow
from forum.domain.repository.interaction import InteractionRepository
from forum.domain.value import InteractionId, InteractionType, TargetType, UserId


class InMemoryInteractionRepository(InteractionRepository):
    """In-memory implementation of InteractionRepository for testing."""

    def __init__(self) -> None:
        self._interactions: dict[InteractionId, Interaction] = {}

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: UUID,
    ) -> Optional[Interaction]:
        """Find a reaction by user and target."""
        for interaction in self._interactions.values():
            if (
                interaction.user_id == user_id
                and interaction.target_type == target_type
                and interaction.target_id == target_id
            ):
                return interaction
        return None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> list[Interaction]:
        """Find a user's reactions on multiple targets."""
        wanted = set(target_ids)
        return [
            i
            for i in self._interactions.values()
            if i.user_id == user_id
            and i.target_type == target_type
            and i.target_id in wanted
        ]

    async def find_by_target(
        self,
        target_type: TargetType,
        target_id: UUID,
    ) -> list[Interaction]:
        """Find all reactions on a target (test inspection only)."""
        return [
            i
            for i in self._interactions.values()
            if i.target_type == target_type and i.target_id == target_id
        ]

    async def save(self, interaction: Interaction) -> Interaction:
        """Insert an interaction.

        Raises:
            ConflictError: If the user already reacted to the target
        """
        existing = await self.find_by_user_and_target(
            interaction.user_id, interaction.target_type, interaction.target_id
        )
        if existing:
            raise ConflictError("Duplicate interaction")

        self._interactions[interaction.id] = interaction
        return interaction

    async def update_type(
        self,
        interaction_id: InteractionId,
        interaction_type: InteractionType,
    ) -> Optional[Interaction]:
        """Switch a stored interaction to another reaction type."""
        interaction = self._interactions.get(interaction_id)
        if not interaction:
            return None
        updated = interaction.model_copy(
            update={"interaction_type": interaction_type, "updated_at": utcnow()}
        )
        self._interactions[interaction_id] = updated
        return updated

    async def delete(self, interaction_id: InteractionId) -> bool:
        """Delete an interaction."""
        return self._interactions.pop(interaction_id, None) is not None
