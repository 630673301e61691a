"""Unit tests for TopicService."""

from uuid import uuid4

import pytest

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.repository import TopicRepository
from forum.domain.service import TopicService
from forum.domain.value import TopicId, TopicSortOrder
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateTopic:
    """Tests for create_topic."""

    @pytest.mark.asyncio
    async def test_new_topic_starts_with_score_one(self, unit_env, user_id):
        """A fresh topic has net_score 1 and no comments."""
        # Arrange
        service = await unit_env.get(TopicService)

        # Act
        topic = await service.create_topic("  Is P = NP?  ", user_id)

        # Assert
        assert topic.title == "Is P = NP?"
        assert topic.net_score == 1
        assert topic.comment_count == 0
        assert topic.total_votes == 0
        assert topic.author_id == user_id

    @pytest.mark.asyncio
    async def test_blank_title_is_rejected(self, unit_env, user_id):
        """Titles must contain something besides whitespace."""
        service = await unit_env.get(TopicService)

        with pytest.raises(ValidationError, match="cannot be empty"):
            await service.create_topic("   ", user_id)

    @pytest.mark.asyncio
    async def test_overlong_title_is_rejected(self, unit_env, user_id):
        """Titles are capped at 300 characters."""
        service = await unit_env.get(TopicService)

        with pytest.raises(ValidationError, match="at most 300"):
            await service.create_topic("x" * 301, user_id)


class TestCommentCount:
    """Tests for increment_comment_count."""

    @pytest.mark.asyncio
    async def test_increments_by_one(self, unit_env, user_id):
        """Each call adds exactly one."""
        # Arrange
        service = await unit_env.get(TopicService)
        repo = await unit_env.get(TopicRepository)
        topic = await service.create_topic("Counting", user_id)

        # Act
        await service.increment_comment_count(topic.id)
        await service.increment_comment_count(topic.id)

        # Assert
        assert (await repo.find_by_id(topic.id)).comment_count == 2

    @pytest.mark.asyncio
    async def test_missing_topic_raises_not_found(self, unit_env):
        """Incrementing an unknown topic fails."""
        service = await unit_env.get(TopicService)

        with pytest.raises(NotFoundError):
            await service.increment_comment_count(TopicId(uuid4()))


class TestListTopics:
    """Tests for list_topics and get_topic."""

    @pytest.mark.asyncio
    async def test_new_sort_lists_latest_first(self, unit_env, user_id):
        """The new feed is ordered by creation time."""
        # Arrange
        service = await unit_env.get(TopicService)
        first = await service.create_topic("First", user_id)
        second = await service.create_topic("Second", user_id)

        # Act
        topics = await service.list_topics(sort=TopicSortOrder.NEW)

        # Assert
        assert [t.id for t in topics] == [second.id, first.id]
        assert await service.count_topics() == 2

    @pytest.mark.asyncio
    async def test_get_topic_missing_raises(self, unit_env):
        """get_topic reports unknown topics."""
        service = await unit_env.get(TopicService)

        with pytest.raises(NotFoundError, match="Topic not found"):
            await service.get_topic(TopicId(uuid4()))

        assert await service.get_topic_by_id(TopicId(uuid4())) is None
