"""Unit tests for comment use cases."""

from uuid import UUID, uuid4

import pytest

from forum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentTreeRequest,
    GetCommentTreeUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from forum.domain.error import ValidationError
from forum.domain.service import InteractionService, TopicService
from forum.domain.value import InteractionType, TargetType, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _setup_thread(env):
    """Create a topic with one root comment and one reply."""
    topic = await (await env.get(TopicService)).create_topic(
        "Thread", UserId(uuid4())
    )
    create = await env.get(CreateCommentUseCase)
    root = await create.execute(
        CreateCommentRequest(
            topic_id=str(topic.id), author_id=str(uuid4()), content="Root"
        )
    )
    reply = await create.execute(
        CreateCommentRequest(
            topic_id=str(topic.id),
            author_id=str(uuid4()),
            content="Reply",
            parent_id=root.comment.comment_id,
        )
    )
    return topic, root.comment, reply.comment


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_reply_depth_follows_parent(self, unit_env):
        """Replies sit one level below their parent."""
        _, root, reply = await _setup_thread(unit_env)

        assert root.depth == 0
        assert reply.depth == 1
        assert reply.parent_id == root.comment_id

    @pytest.mark.asyncio
    async def test_malformed_parent_is_rejected(self, unit_env):
        """Parent IDs must be UUIDs."""
        topic, _, _ = await _setup_thread(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError, match="parent_id"):
            await use_case.execute(
                CreateCommentRequest(
                    topic_id=str(topic.id),
                    author_id=str(uuid4()),
                    content="Hi",
                    parent_id="nope",
                )
            )


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_flat_list_with_viewer_reactions(self, unit_env, user_id):
        """All comments are returned flat with the viewer's reactions."""
        # Arrange
        topic, root, reply = await _setup_thread(unit_env)
        interactions = await unit_env.get(InteractionService)
        await interactions.apply_reaction(
            user_id,
            TargetType.COMMENT,
            UUID(reply.comment_id),
            InteractionType.VOTE_UP,
        )
        use_case = await unit_env.get(ListCommentsUseCase)

        # Act
        response = await use_case.execute(
            ListCommentsRequest(topic_id=str(topic.id), user_id=str(user_id))
        )

        # Assert
        assert response.total == 2
        assert response.comments[0].comment_id == reply.comment_id
        assert response.comments[0].viewer_reaction == InteractionType.VOTE_UP
        assert response.comments[1].viewer_reaction is None

    @pytest.mark.asyncio
    async def test_unknown_sort_is_rejected(self, unit_env):
        """Only new, top and controversial are accepted."""
        topic, _, _ = await _setup_thread(unit_env)
        use_case = await unit_env.get(ListCommentsUseCase)

        with pytest.raises(ValidationError, match="CommentSortOrder"):
            await use_case.execute(
                ListCommentsRequest(topic_id=str(topic.id), sort="hot")
            )


class TestGetCommentTreeUseCase:
    """Tests for GetCommentTreeUseCase."""

    @pytest.mark.asyncio
    async def test_tree_nests_reply_under_root(self, unit_env):
        """The response mirrors the reply structure."""
        topic, root, reply = await _setup_thread(unit_env)
        use_case = await unit_env.get(GetCommentTreeUseCase)

        response = await use_case.execute(
            GetCommentTreeRequest(topic_id=str(topic.id), sort="new")
        )

        assert response.total == 2
        assert [r.comment_id for r in response.roots] == [root.comment_id]
        assert [c.comment_id for c in response.roots[0].children] == [
            reply.comment_id
        ]
