"""Interaction ledger domain service."""

from typing import Dict, Optional, Sequence
from uuid import UUID, uuid4

import logfire

from forum.domain.error import ConflictError, NotFoundError
from forum.domain.model.interaction import Interaction
from forum.domain.model.common import utcnow
from forum.domain.repository import (
    CommentRepository,
    InteractionRepository,
    TopicRepository,
)
from forum.domain.value import (
    CommentId,
    InteractionId,
    InteractionType,
    ReactionOutcome,
    TargetType,
    TopicId,
    UserId,
)

from .base import Service
from .score_service import ScoreAggregator

# One re-read after a uniqueness conflict, then the conflict is surfaced
MAX_CONFLICT_RETRIES = 1


class InteractionService(Service):
    """Domain service for the interaction ledger.

    Holds at most one reaction per (user, target). Each call adds, toggles
    off or switches that reaction and hands the resulting deltas to the
    ScoreAggregator.
    """

    def __init__(
        self,
        interaction_repository: InteractionRepository,
        topic_repository: TopicRepository,
        comment_repository: CommentRepository,
        score_aggregator: ScoreAggregator,
    ) -> None:
        """Initialize interaction service.

        Args:
            interaction_repository: Interaction repository
            topic_repository: Topic repository (target existence checks)
            comment_repository: Comment repository (target existence checks)
            score_aggregator: Applies counter deltas
        """
        self.interaction_repository = interaction_repository
        self.topic_repository = topic_repository
        self.comment_repository = comment_repository
        self.score_aggregator = score_aggregator

    async def apply_reaction(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: UUID,
        interaction_type: InteractionType,
    ) -> ReactionOutcome:
        """Apply a reaction to a topic or comment.

        - No reaction stored: insert it
        - Same reaction stored: delete it (toggle-off)
        - Different reaction stored: switch it in place

        Args:
            user_id: Reacting user
            target_type: Type of target
            target_id: Target ID
            interaction_type: Requested reaction

        Returns:
            Outcome with the stored reaction and the net score delta

        Raises:
            NotFoundError: If the target does not exist
            ConflictError: If a concurrent write still conflicts after one retry
        """
        with logfire.span(
            "interaction_service.apply_reaction",
            user_id=str(user_id),
            target_type=target_type.value,
            target_id=str(target_id),
            interaction_type=interaction_type.value,
        ):
            await self._ensure_target_exists(target_type, target_id)

            attempt = 0
            while True:
                existing = await self.interaction_repository.find_by_user_and_target(
                    user_id, target_type, target_id
                )
                outcome = ReactionOutcome.from_transition(
                    existing.interaction_type if existing else None, interaction_type
                )
                try:
                    await self._write_ledger(
                        existing, outcome, user_id, target_type, target_id
                    )
                    break
                except ConflictError:
                    if attempt >= MAX_CONFLICT_RETRIES:
                        logfire.error(
                            "Reaction conflict persisted after retry",
                            user_id=str(user_id),
                            target_id=str(target_id),
                        )
                        raise
                    attempt += 1
                    logfire.warn(
                        "Concurrent reaction detected, re-reading",
                        user_id=str(user_id),
                        target_id=str(target_id),
                    )

            await self.score_aggregator.adjust_score(target_type, target_id, outcome)

            logfire.info(
                "Reaction applied",
                user_id=str(user_id),
                target_id=str(target_id),
                previous=outcome.previous.value if outcome.previous else None,
                current=outcome.current.value if outcome.current else None,
                delta=outcome.delta,
            )
            return outcome

    async def get_user_reactions(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> Dict[UUID, InteractionType]:
        """Look up a user's current reactions on several targets.

        Args:
            user_id: User ID
            target_type: Type of targets
            target_ids: Target IDs to check

        Returns:
            Mapping of target ID to stored reaction (targets without one are absent)
        """
        if not target_ids:
            return {}

        # Batch query to fetch all reactions at once (avoid N+1)
        interactions = await self.interaction_repository.find_by_user_and_targets(
            user_id=user_id,
            target_type=target_type,
            target_ids=target_ids,
        )
        return {
            interaction.target_id: interaction.interaction_type
            for interaction in interactions
        }

    async def _ensure_target_exists(
        self, target_type: TargetType, target_id: UUID
    ) -> None:
        if target_type == TargetType.TOPIC:
            target = await self.topic_repository.find_by_id(TopicId(target_id))
        else:
            target = await self.comment_repository.find_by_id(CommentId(target_id))
        if not target:
            logfire.warn(
                "Reaction on non-existent target",
                target_type=target_type.value,
                target_id=str(target_id),
            )
            raise NotFoundError(target_type.value.capitalize(), str(target_id))

    async def _write_ledger(
        self,
        existing: Optional[Interaction],
        outcome: ReactionOutcome,
        user_id: UserId,
        target_type: TargetType,
        target_id: UUID,
    ) -> None:
        """Persist the ledger side of a transition.

        A row that vanished or changed underneath us is reported as a
        ConflictError so the caller re-reads.
        """
        if existing is None:
            now = utcnow()
            await self.interaction_repository.save(
                Interaction(
                    id=InteractionId(uuid4()),
                    user_id=user_id,
                    target_type=target_type,
                    target_id=target_id,
                    interaction_type=outcome.current,
                    created_at=now,
                    updated_at=now,
                )
            )
        elif outcome.current is None:
            if not await self.interaction_repository.delete(existing.id):
                raise ConflictError("Reaction was removed concurrently")
        else:
            updated = await self.interaction_repository.update_type(
                existing.id, outcome.current
            )
            if updated is None:
                raise ConflictError("Reaction was removed concurrently")
