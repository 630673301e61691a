"""Reaction transition value object."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from forum.domain.value.types import InteractionType


class ReactionOutcome(BaseModel):
    """Result of applying a reaction to the interaction ledger.

    Describes the move from the previously stored reaction to the new one
    and the signed counter changes that move implies:

    - delta: change to net_score
    - vote_delta: change to the number of live up/down votes
    - heart_delta: change to the number of live hearts
    """

    model_config = ConfigDict(frozen=True)

    previous: Optional[InteractionType] = None
    current: Optional[InteractionType] = None
    delta: int = 0
    vote_delta: int = 0
    heart_delta: int = 0

    @property
    def stored(self) -> bool:
        """Whether a reaction row exists after the transition."""
        return self.current is not None

    @property
    def changes_counters(self) -> bool:
        """Whether any aggregate counter has to move."""
        return bool(self.delta or self.vote_delta or self.heart_delta)

    @classmethod
    def from_transition(
        cls,
        previous: Optional[InteractionType],
        requested: InteractionType,
    ) -> "ReactionOutcome":
        """Resolve a requested reaction against the stored one.

        - Nothing stored: the reaction is added.
        - Same reaction stored: it is toggled off.
        - Different reaction stored: it is replaced in place.

        Args:
            previous: Reaction currently stored for the user/target, if any
            requested: Reaction the user just issued

        Returns:
            Outcome with the new stored state and counter deltas
        """
        current = None if previous == requested else requested
        return cls(
            previous=previous,
            current=current,
            delta=_score(current) - _score(previous),
            vote_delta=_is_vote(current) - _is_vote(previous),
            heart_delta=_is_heart(current) - _is_heart(previous),
        )


def _score(reaction: Optional[InteractionType]) -> int:
    return reaction.base_value if reaction else 0


def _is_vote(reaction: Optional[InteractionType]) -> int:
    return int(reaction is not None and reaction.is_vote)


def _is_heart(reaction: Optional[InteractionType]) -> int:
    return int(reaction == InteractionType.HEART)
