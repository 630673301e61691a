"""Topic response models shared by topic use cases."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import Topic
from forum.domain.value import InteractionType


class TopicItem(BaseModel):
    """Topic in API responses."""

    topic_id: str
    title: str
    author_id: str
    net_score: int
    comment_count: int
    total_votes: int
    heart_count: int
    created_at: datetime
    viewer_reaction: InteractionType | None = None
    hot_score: float | None = None

    @classmethod
    def from_domain(
        cls,
        topic: Topic,
        viewer_reaction: InteractionType | None = None,
        hot_score: float | None = None,
    ) -> "TopicItem":
        """Convert a domain topic to its response model."""
        return cls(
            topic_id=str(topic.id),
            title=topic.title,
            author_id=str(topic.author_id),
            net_score=topic.net_score,
            comment_count=topic.comment_count,
            total_votes=topic.total_votes,
            heart_count=topic.heart_count,
            created_at=topic.created_at,
            viewer_reaction=viewer_reaction,
            hot_score=hot_score,
        )
