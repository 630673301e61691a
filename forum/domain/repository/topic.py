"""Topic repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from forum.domain.model.topic import Topic
from forum.domain.value import TopicId, TopicSortOrder


class TopicRepository(ABC):
    """Repository for Topic aggregate.

    Defines the contract for topic persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID.

        Args:
            topic_id: The topic's unique identifier

        Returns:
            The topic if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: TopicSortOrder = TopicSortOrder.HOT,
        limit: int = 20,
        offset: int = 0,
        now: Optional[datetime] = None,
    ) -> List[Topic]:
        """Find topics in feed order with pagination.

        Ordering happens before pagination so every page is a slice of
        the same global ranking.

        Args:
            sort: Feed order (hot, new or top)
            limit: Maximum number of topics to return
            offset: Number of topics to skip
            now: Reference time for hot ranking (defaults to current time)

        Returns:
            List of topics in the requested order
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all topics."""
        pass

    @abstractmethod
    async def save(self, topic: Topic) -> Topic:
        """Insert a new topic.

        Args:
            topic: The topic to save

        Returns:
            The saved topic
        """
        pass

    @abstractmethod
    async def adjust_counters(
        self,
        topic_id: TopicId,
        delta: int,
        vote_delta: int = 0,
        heart_delta: int = 0,
    ) -> bool:
        """Atomically add signed deltas to the reaction counters.

        Must be a single storage-side arithmetic update, never a
        fetch-then-write from application code.

        Args:
            topic_id: The topic ID
            delta: Change to net_score
            vote_delta: Change to total_votes
            heart_delta: Change to heart_count

        Returns:
            True if the topic exists and was updated, False otherwise
        """
        pass

    @abstractmethod
    async def increment_comment_count(self, topic_id: TopicId) -> bool:
        """Atomically increment comment_count by 1.

        Args:
            topic_id: The topic ID

        Returns:
            True if the topic exists and was updated, False otherwise
        """
        pass
