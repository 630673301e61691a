"""Unit tests for ReactUseCase."""

from uuid import uuid4

import pytest

from forum.application.usecase.interaction import ReactRequest, ReactUseCase
from forum.domain.error import NotFoundError, ValidationError
from forum.domain.service import TopicService
from forum.domain.value import InteractionType, TargetType, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _request(user_id, target_id, interaction_type="VOTE_UP", target_type="TOPIC"):
    return ReactRequest(
        user_id=str(user_id),
        target_id=str(target_id),
        target_type=target_type,
        interaction_type=interaction_type,
    )


class TestReactUseCase:
    """Tests for ReactUseCase."""

    @pytest.mark.asyncio
    async def test_returns_delta_and_stored_reaction(self, unit_env, user_id):
        """The response carries the delta and the reaction now stored."""
        # Arrange
        use_case = await unit_env.get(ReactUseCase)
        topic = await (await unit_env.get(TopicService)).create_topic(
            "React", UserId(uuid4())
        )

        # Act
        response = await use_case.execute(_request(user_id, topic.id))

        # Assert
        assert response.success is True
        assert response.delta == 1
        assert response.target_id == str(topic.id)
        assert response.target_type == TargetType.TOPIC
        assert response.reaction == InteractionType.VOTE_UP

    @pytest.mark.asyncio
    async def test_toggle_off_reports_no_reaction(self, unit_env, user_id):
        """After toggling off, the stored reaction is null."""
        # Arrange
        use_case = await unit_env.get(ReactUseCase)
        topic = await (await unit_env.get(TopicService)).create_topic(
            "React", UserId(uuid4())
        )
        await use_case.execute(_request(user_id, topic.id, "HEART"))

        # Act
        response = await use_case.execute(_request(user_id, topic.id, "HEART"))

        # Assert
        assert response.delta == 0
        assert response.reaction is None

    @pytest.mark.asyncio
    async def test_unknown_interaction_type_is_rejected(self, unit_env, user_id):
        """Unknown enum values are validation errors."""
        use_case = await unit_env.get(ReactUseCase)

        with pytest.raises(ValidationError, match="InteractionType"):
            await use_case.execute(_request(user_id, uuid4(), "LIKE"))

    @pytest.mark.asyncio
    async def test_unknown_target_type_is_rejected(self, unit_env, user_id):
        """Only TOPIC and COMMENT can be reacted to."""
        use_case = await unit_env.get(ReactUseCase)

        with pytest.raises(ValidationError, match="TargetType"):
            await use_case.execute(_request(user_id, uuid4(), target_type="USER"))

    @pytest.mark.asyncio
    async def test_malformed_target_id_is_rejected(self, unit_env, user_id):
        """Target IDs must be UUIDs."""
        use_case = await unit_env.get(ReactUseCase)

        with pytest.raises(ValidationError, match="target_id"):
            await use_case.execute(_request(user_id, "not-a-uuid"))

    @pytest.mark.asyncio
    async def test_missing_target_raises_not_found(self, unit_env, user_id):
        """Unknown comments are reported as not found."""
        use_case = await unit_env.get(ReactUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                _request(user_id, uuid4(), target_type="COMMENT")
            )
