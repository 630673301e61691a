"""Topic aggregate root.

Topics head the feed. Their ranking is derived from net_score and
created_at at read time.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import ReactableModel, utcnow
from forum.domain.value import TopicId, UserId


class Topic(ReactableModel):
    """Topic aggregate root.

    Reaction counters are owned by the ScoreAggregator; comment_count is
    owned by TopicService.increment_comment_count.
    """

    id: TopicId
    title: str = Field(min_length=1, max_length=300)
    author_id: UserId
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
