"""Base models shared by forum entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

# Score a topic or comment carries before anyone reacts to it
INITIAL_NET_SCORE = 1


def utcnow() -> datetime:
    """Timezone-aware current time used for all domain timestamps."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Domain models are immutable; updates go through model_copy.
    """

    model_config = ConfigDict(frozen=True)


class ReactableModel(DomainModel):
    """Entity that users can react to.

    Carries the aggregate counters maintained by the ScoreAggregator:
    - net_score: sum of reaction base values on top of the initial score
    - total_votes: live up and down votes
    - heart_count: live hearts
    """

    net_score: int = INITIAL_NET_SCORE
    total_votes: int = Field(default=0, ge=0)
    heart_count: int = Field(default=0, ge=0)

    def with_counter_deltas(
        self, delta: int, vote_delta: int = 0, heart_delta: int = 0
    ) -> "ReactableModel":
        """Copy of this entity with the counter deltas applied."""
        return self.model_copy(
            update={
                "net_score": self.net_score + delta,
                "total_votes": self.total_votes + vote_delta,
                "heart_count": self.heart_count + heart_delta,
            }
        )
