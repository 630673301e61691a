"""Unit tests for topic use cases."""

from uuid import UUID, uuid4

import pytest

from forum.application.usecase.topic import (
    CreateTopicRequest,
    CreateTopicUseCase,
    GetTopicRequest,
    GetTopicUseCase,
    ListTopicsRequest,
    ListTopicsUseCase,
)
from forum.domain.error import NotFoundError, ValidationError
from forum.domain.service import InteractionService
from forum.domain.value import InteractionType, TargetType, TopicSortOrder
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _create_topics(env, count):
    use_case = await env.get(CreateTopicUseCase)
    responses = []
    for index in range(count):
        responses.append(
            await use_case.execute(
                CreateTopicRequest(title=f"Topic {index}", author_id=str(uuid4()))
            )
        )
    return [r.topic for r in responses]


class TestCreateTopicUseCase:
    """Tests for CreateTopicUseCase."""

    @pytest.mark.asyncio
    async def test_malformed_author_is_rejected(self, unit_env):
        """Author IDs must be UUIDs."""
        use_case = await unit_env.get(CreateTopicUseCase)

        with pytest.raises(ValidationError, match="author_id"):
            await use_case.execute(CreateTopicRequest(title="Hi", author_id="bob"))


class TestListTopicsUseCase:
    """Tests for ListTopicsUseCase."""

    @pytest.mark.asyncio
    async def test_defaults_to_hot_with_page_size_twenty(self, unit_env):
        """Without parameters, the first hot page of 20 is returned."""
        # Arrange
        await _create_topics(unit_env, 25)
        use_case = await unit_env.get(ListTopicsUseCase)

        # Act
        response = await use_case.execute(ListTopicsRequest())

        # Assert
        assert response.sort == TopicSortOrder.HOT
        assert response.page == 1
        assert response.page_size == 20
        assert len(response.topics) == 20
        assert response.total == 25

    @pytest.mark.asyncio
    async def test_second_page_holds_the_rest(self, unit_env):
        """Pages are 1-based."""
        await _create_topics(unit_env, 25)
        use_case = await unit_env.get(ListTopicsUseCase)

        response = await use_case.execute(ListTopicsRequest(page=2))

        assert len(response.topics) == 5

    @pytest.mark.asyncio
    async def test_includes_viewer_reactions(self, unit_env, user_id):
        """With a user_id, each topic carries that user's reaction."""
        # Arrange
        first, second = await _create_topics(unit_env, 2)
        interactions = await unit_env.get(InteractionService)
        await interactions.apply_reaction(
            user_id,
            TargetType.TOPIC,
            UUID(first.topic_id),
            InteractionType.VOTE_UP,
        )
        use_case = await unit_env.get(ListTopicsUseCase)

        # Act
        response = await use_case.execute(
            ListTopicsRequest(sort="top", user_id=str(user_id))
        )

        # Assert
        by_id = {t.topic_id: t for t in response.topics}
        assert by_id[first.topic_id].viewer_reaction == InteractionType.VOTE_UP
        assert by_id[second.topic_id].viewer_reaction is None
        assert response.topics[0].topic_id == first.topic_id
        assert response.topics[0].hot_score > 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "request_kwargs, message",
        [
            ({"page": 0}, "page must be"),
            ({"page_size": 0}, "page_size"),
            ({"page_size": 101}, "page_size"),
            ({"sort": "best"}, "TopicSortOrder"),
        ],
    )
    async def test_invalid_parameters_are_rejected(
        self, unit_env, request_kwargs, message
    ):
        """Out-of-range paging and unknown sorts are validation errors."""
        use_case = await unit_env.get(ListTopicsUseCase)

        with pytest.raises(ValidationError, match=message):
            await use_case.execute(ListTopicsRequest(**request_kwargs))


class TestGetTopicUseCase:
    """Tests for GetTopicUseCase."""

    @pytest.mark.asyncio
    async def test_returns_topic(self, unit_env):
        """Existing topics are returned."""
        (topic,) = await _create_topics(unit_env, 1)
        use_case = await unit_env.get(GetTopicUseCase)

        response = await use_case.execute(GetTopicRequest(topic_id=topic.topic_id))

        assert response.topic.title == "Topic 0"
        assert response.topic.net_score == 1

    @pytest.mark.asyncio
    async def test_missing_topic_raises_not_found(self, unit_env):
        """Unknown topics are not found."""
        use_case = await unit_env.get(GetTopicUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetTopicRequest(topic_id=str(uuid4())))

