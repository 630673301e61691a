"""Interaction repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from forum.domain.model.interaction import Interaction
from forum.domain.value import InteractionId, InteractionType, TargetType, UserId


class InteractionRepository(ABC):
    """Repository for Interaction entity (the interaction ledger).

    Defines the contract for interaction persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: UUID,
    ) -> Optional[Interaction]:
        """Find a user's current reaction on a target.

        Args:
            user_id: The user's ID
            target_type: Type of target (topic or comment)
            target_id: ID of the target

        Returns:
            The interaction if one is stored, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> List[Interaction]:
        """Find a user's reactions on multiple targets (batch query).

        Args:
            user_id: The user's ID
            target_type: Type of targets (topic or comment)
            target_ids: IDs of the targets to check

        Returns:
            Interactions by the user on the given targets
        """
        pass

    @abstractmethod
    async def save(self, interaction: Interaction) -> Interaction:
        """Insert a new interaction.

        Args:
            interaction: The interaction to insert

        Returns:
            The saved interaction

        Raises:
            ConflictError: If the user already holds a reaction on the target
        """
        pass

    @abstractmethod
    async def update_type(
        self,
        interaction_id: InteractionId,
        interaction_type: InteractionType,
    ) -> Optional[Interaction]:
        """Switch a stored interaction to another reaction type in place.

        Args:
            interaction_id: The interaction ID
            interaction_type: New reaction type

        Returns:
            The updated interaction, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, interaction_id: InteractionId) -> bool:
        """Delete an interaction (toggle-off).

        Args:
            interaction_id: The interaction ID

        Returns:
            True if a row was deleted, False if it no longer existed
        """
        pass
