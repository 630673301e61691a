"""In-memory topic repository for testing."""

from datetime import datetime
from typing import Optional

from forum.domain.model.topic import Topic
from forum.domain.repository.topic import TopicRepository
from forum.domain.service.ranking import FeedRanker
from forum.domain.value import TopicId, TopicSortOrder


class InMemoryTopicRepository(TopicRepository):
    """In-memory implementation of TopicRepository for testing.

    Hot ordering delegates to FeedRanker so it matches the SQL expression.
    """

    def __init__(self, ranker: Optional[FeedRanker] = None) -> None:
        self._topics: dict[TopicId, Topic] = {}
        self.ranker = ranker or FeedRanker()

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID."""
        return self._topics.get(topic_id)

    async def find_all(
        self,
        sort: TopicSortOrder = TopicSortOrder.HOT,
        limit: int = 20,
        offset: int = 0,
        now: Optional[datetime] = None,
    ) -> list[Topic]:
        """Find topics in feed order with pagination."""
        topics = list(self._topics.values())

        if sort == TopicSortOrder.NEW:
            topics.sort(key=lambda t: t.created_at, reverse=True)
        elif sort == TopicSortOrder.TOP:
            topics.sort(key=lambda t: (t.net_score, t.created_at), reverse=True)
        else:
            topics = self.ranker.rank(topics, now)

        return topics[offset : offset + limit]

    async def count(self) -> int:
        """Count all topics."""
        return len(self._topics)

    async def save(self, topic: Topic) -> Topic:
        """Insert a new topic."""
        self._topics[topic.id] = topic
        return topic

    async def adjust_counters(
        self,
        topic_id: TopicId,
        delta: int,
        vote_delta: int = 0,
        heart_delta: int = 0,
    ) -> bool:
        """Add deltas to the reaction counters."""
        topic = self._topics.get(topic_id)
        if not topic:
            return False
        self._topics[topic_id] = topic.with_counter_deltas(
            delta, vote_delta, heart_delta
        )
        return True

    async def increment_comment_count(self, topic_id: TopicId) -> bool:
        """Increment comment_count by 1."""
        topic = self._topics.get(topic_id)
        if not topic:
            return False
        self._topics[topic_id] = topic.model_copy(
            update={"comment_count": topic.comment_count + 1}
        )
        return True
