"""Score aggregation domain service."""

from uuid import UUID

import logfire

from forum.domain.error import NotFoundError
from forum.domain.repository import CommentRepository, TopicRepository
from forum.domain.value import CommentId, ReactionOutcome, TargetType, TopicId

from .base import Service


class ScoreAggregator(Service):
    """Applies reaction deltas to topic and comment counters.

    This is the only writer of net_score, total_votes and heart_count.
    Every change is a single storage-side increment so concurrent reactions
    on the same target never lose updates.
    """

    def __init__(
        self,
        topic_repository: TopicRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize score aggregator.

        Args:
            topic_repository: Topic repository
            comment_repository: Comment repository
        """
        self.topic_repository = topic_repository
        self.comment_repository = comment_repository

    async def adjust_score(
        self,
        target_type: TargetType,
        target_id: UUID,
        outcome: ReactionOutcome,
    ) -> None:
        """Apply the counter deltas of a reaction outcome to its target.

        Storage failures propagate as StorageError and are not retried;
        the caller's transaction is rolled back.

        Args:
            target_type: Type of target
            target_id: Target ID
            outcome: Reaction outcome carrying the deltas

        Raises:
            NotFoundError: If the target no longer exists
        """
        with logfire.span(
            "score_aggregator.adjust_score",
            target_type=target_type.value,
            target_id=str(target_id),
            delta=outcome.delta,
            vote_delta=outcome.vote_delta,
            heart_delta=outcome.heart_delta,
        ):
            if not outcome.changes_counters:
                return

            if target_type == TargetType.TOPIC:
                updated = await self.topic_repository.adjust_counters(
                    TopicId(target_id),
                    delta=outcome.delta,
                    vote_delta=outcome.vote_delta,
                    heart_delta=outcome.heart_delta,
                )
            else:
                updated = await self.comment_repository.adjust_counters(
                    CommentId(target_id),
                    delta=outcome.delta,
                    vote_delta=outcome.vote_delta,
                    heart_delta=outcome.heart_delta,
                )

            if not updated:
                logfire.error(
                    "Score target vanished",
                    target_type=target_type.value,
                    target_id=str(target_id),
                )
                raise NotFoundError(target_type.value.capitalize(), str(target_id))

            logfire.info(
                "Score adjusted",
                target_type=target_type.value,
                target_id=str(target_id),
                delta=outcome.delta,
            )
