"""Topic domain service."""

from datetime import datetime
from typing import List, Optional
from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model.topic import Topic
from forum.domain.repository import TopicRepository
from forum.domain.value import TopicId, TopicSortOrder, UserId

from .base import Service


class TopicService(Service):
    """Domain service for topic operations."""

    def __init__(self, topic_repository: TopicRepository) -> None:
        """Initialize topic service.

        Args:
            topic_repository: Topic repository
        """
        self.topic_repository = topic_repository

    async def create_topic(self, title: str, author_id: UserId) -> Topic:
        """Create a topic with a fresh score of 1 and no comments.

        Args:
            title: Topic title
            author_id: Author user ID

        Returns:
            Created topic

        Raises:
            ValidationError: If the title is blank or too long
        """
        with logfire.span("topic_service.create_topic", author_id=str(author_id)):
            title = title.strip()
            if not title:
                raise ValidationError("Topic title cannot be empty")
            if len(title) > 300:
                raise ValidationError("Topic title must be at most 300 characters")

            topic = Topic(id=TopicId(uuid4()), title=title, author_id=author_id)
            saved = await self.topic_repository.save(topic)
            logfire.info("Topic created", topic_id=str(saved.id), title=saved.title)
            return saved

    async def get_topic_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Get a topic by ID.

        Args:
            topic_id: Topic ID

        Returns:
            Topic if found, None otherwise
        """
        with logfire.span("topic_service.get_topic_by_id", topic_id=str(topic_id)):
            topic = await self.topic_repository.find_by_id(topic_id)
            if not topic:
                logfire.warn("Topic not found", topic_id=str(topic_id))
            return topic

    async def get_topic(self, topic_id: TopicId) -> Topic:
        """Get a topic by ID.

        Raises:
            NotFoundError: If topic not found
        """
        topic = await self.get_topic_by_id(topic_id)
        if not topic:
            raise NotFoundError("Topic", str(topic_id))
        return topic

    async def list_topics(
        self,
        sort: TopicSortOrder = TopicSortOrder.HOT,
        limit: int = 20,
        offset: int = 0,
        now: Optional[datetime] = None,
    ) -> List[Topic]:
        """List one page of the topic feed.

        Args:
            sort: Feed order
            limit: Page size
            offset: Number of topics to skip
            now: Reference time for hot ranking

        Returns:
            Topics in feed order
        """
        with logfire.span(
            "topic_service.list_topics", sort=sort.value, limit=limit, offset=offset
        ):
            topics = await self.topic_repository.find_all(
                sort=sort, limit=limit, offset=offset, now=now
            )
            logfire.info("Topics listed", count=len(topics))
            return topics

    async def count_topics(self) -> int:
        """Count all topics."""
        return await self.topic_repository.count()

    async def increment_comment_count(self, topic_id: TopicId) -> None:
        """Atomically increment a topic's comment count.

        Uses SQL-level increment to avoid race conditions.

        Args:
            topic_id: Topic ID

        Raises:
            NotFoundError: If topic not found
        """
        with logfire.span(
            "topic_service.increment_comment_count", topic_id=str(topic_id)
        ):
            updated = await self.topic_repository.increment_comment_count(topic_id)
            if not updated:
                logfire.error(
                    "Topic not found for comment count increment",
                    topic_id=str(topic_id),
                )
                raise NotFoundError("Topic", str(topic_id))
            logfire.info("Comment count incremented", topic_id=str(topic_id))
