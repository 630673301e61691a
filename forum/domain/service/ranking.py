"""Feed ranking.

Hot score for a topic:

    score = max(net_score - 1, 0) / (age_hours + time_offset) ** gravity

The starting score of 1 is subtracted so a topic nobody has voted on
ranks at zero, and the age is clamped at zero so a timestamp slightly in
the future (clock skew) cannot inflate the score.
"""

from datetime import datetime
from typing import Iterable, List, Optional

from forum.domain.model.common import INITIAL_NET_SCORE, utcnow
from forum.domain.model.topic import Topic

from .base import Service

DEFAULT_GRAVITY = 1.8
DEFAULT_TIME_OFFSET = 2.0


def ranking_score(
    net_score: int,
    created_at: datetime,
    now: datetime,
    gravity: float = DEFAULT_GRAVITY,
    time_offset: float = DEFAULT_TIME_OFFSET,
) -> float:
    """Compute the time-decayed hot score of a topic.

    Args:
        net_score: Topic net score (starts at 1)
        created_at: Topic creation time
        now: Reference time
        gravity: Decay exponent
        time_offset: Hours added to the age before decay

    Returns:
        Non-negative hot score
    """
    age_hours = max((now - created_at).total_seconds() / 3600.0, 0.0)
    points = max(net_score - INITIAL_NET_SCORE, 0)
    return points / (age_hours + time_offset) ** gravity


class FeedRanker(Service):
    """Orders topics for the hot feed."""

    def __init__(
        self,
        gravity: float = DEFAULT_GRAVITY,
        time_offset: float = DEFAULT_TIME_OFFSET,
    ) -> None:
        """Initialize feed ranker.

        Args:
            gravity: Decay exponent
            time_offset: Hours added to topic age before decay
        """
        self.gravity = gravity
        self.time_offset = time_offset

    def score(self, topic: Topic, now: Optional[datetime] = None) -> float:
        """Hot score of a single topic at the given time."""
        return ranking_score(
            topic.net_score,
            topic.created_at,
            now or utcnow(),
            gravity=self.gravity,
            time_offset=self.time_offset,
        )

    def rank(
        self, topics: Iterable[Topic], now: Optional[datetime] = None
    ) -> List[Topic]:
        """Sort topics by hot score, highest first.

        Ties go to the newer topic.

        Args:
            topics: Topics to rank
            now: Reference time (defaults to current time)

        Returns:
            New list in feed order
        """
        now = now or utcnow()
        return sorted(
            topics,
            key=lambda topic: (self.score(topic, now), topic.created_at),
            reverse=True,
        )
