"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.repository import CommentRepository, TopicRepository
from forum.domain.service import CommentService, TopicService
from forum.domain.value import CommentId, CommentSortOrder, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _create_topic(env, title="Threads"):
    return await (await env.get(TopicService)).create_topic(title, UserId(uuid4()))


async def _build_chain(service, topic_id, length):
    """Create a reply chain of ``length`` comments, returning them in order."""
    chain = []
    parent_id = None
    for index in range(length):
        comment = await service.create_comment(
            topic_id, UserId(uuid4()), f"Reply {index}", parent_id=parent_id
        )
        chain.append(comment)
        parent_id = comment.id
    return chain


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_top_level_comment_has_depth_zero(self, unit_env, user_id):
        """Comments without a parent start at depth 0 with score 1."""
        # Arrange
        service = await unit_env.get(CommentService)
        topic = await _create_topic(unit_env)

        # Act
        comment = await service.create_comment(topic.id, user_id, "Hello")

        # Assert
        assert comment.depth == 0
        assert comment.parent_id is None
        assert comment.net_score == 1

    @pytest.mark.asyncio
    async def test_reply_to_depth_four_is_accepted(self, unit_env):
        """A reply to a depth-4 comment is stored at depth 5."""
        # Arrange
        service = await unit_env.get(CommentService)
        topic = await _create_topic(unit_env)
        chain = await _build_chain(service, topic.id, 5)

        # Assert
        assert chain[4].depth == 4

        # Act
        reply = await service.create_comment(
            topic.id, UserId(uuid4()), "Deepest", parent_id=chain[4].id
        )

        # Assert
        assert reply.depth == 5

    @pytest.mark.asyncio
    async def test_reply_to_depth_five_is_rejected(self, unit_env):
        """Replying below depth 5 fails and stores nothing."""
        # Arrange
        service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        topic_repo = await unit_env.get(TopicRepository)
        topic = await _create_topic(unit_env)
        chain = await _build_chain(service, topic.id, 6)
        assert chain[-1].depth == 5

        # Act & Assert
        with pytest.raises(ValidationError, match="Max comment depth reached"):
            await service.create_comment(
                topic.id, UserId(uuid4()), "Too deep", parent_id=chain[-1].id
            )
        assert await comment_repo.count_by_topic(topic.id) == 6
        assert (await topic_repo.find_by_id(topic.id)).comment_count == 6

    @pytest.mark.asyncio
    async def test_three_comments_count_three(self, unit_env, user_id):
        """comment_count tracks every created comment."""
        # Arrange
        service = await unit_env.get(CommentService)
        topic_repo = await unit_env.get(TopicRepository)
        topic = await _create_topic(unit_env)

        # Act
        first = await service.create_comment(topic.id, user_id, "One")
        await service.create_comment(topic.id, user_id, "Two", parent_id=first.id)
        await service.create_comment(topic.id, user_id, "Three")

        # Assert
        assert (await topic_repo.find_by_id(topic.id)).comment_count == 3

    @pytest.mark.asyncio
    async def test_missing_topic_raises_not_found(self, unit_env, user_id):
        """Comments need an existing topic."""
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Topic not found"):
            await service.create_comment(uuid4(), user_id, "Orphan")

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env, user_id):
        """Replies need an existing parent."""
        service = await unit_env.get(CommentService)
        topic = await _create_topic(unit_env)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await service.create_comment(
                topic.id, user_id, "Reply", parent_id=CommentId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_topic_is_rejected(self, unit_env, user_id):
        """A parent must belong to the same topic."""
        # Arrange
        service = await unit_env.get(CommentService)
        topic = await _create_topic(unit_env, "First")
        other = await _create_topic(unit_env, "Second")
        parent = await service.create_comment(other.id, user_id, "Elsewhere")

        # Act & Assert
        with pytest.raises(ValidationError, match="does not belong"):
            await service.create_comment(
                topic.id, user_id, "Reply", parent_id=parent.id
            )

    @pytest.mark.asyncio
    async def test_blank_content_is_rejected(self, unit_env, user_id):
        """Whitespace-only content is not a comment."""
        service = await unit_env.get(CommentService)
        topic = await _create_topic(unit_env)

        with pytest.raises(ValidationError, match="cannot be empty"):
            await service.create_comment(topic.id, user_id, "   ")

    @pytest.mark.asyncio
    async def test_overlong_content_is_rejected(self, unit_env, user_id):
        """Content past 10000 characters is a validation error, not a crash."""
        # Arrange
        service = await unit_env.get(CommentService)
        topic_repo = await unit_env.get(TopicRepository)
        topic = await _create_topic(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError, match="at most 10000 characters"):
            await service.create_comment(topic.id, user_id, "x" * 10001)
        assert (await topic_repo.find_by_id(topic.id)).comment_count == 0

    @pytest.mark.asyncio
    async def test_content_at_limit_is_accepted(self, unit_env, user_id):
        """Exactly 10000 characters is allowed."""
        service = await unit_env.get(CommentService)
        topic = await _create_topic(unit_env)

        comment = await service.create_comment(topic.id, user_id, "x" * 10000)

        assert len(comment.content) == 10000


class TestReadComments:
    """Tests for get_comments and get_comment_tree."""

    @pytest.mark.asyncio
    async def test_get_comments_sorted_new(self, unit_env, user_id):
        """The new order lists the latest comment first."""
        # Arrange
        service = await unit_env.get(CommentService)
        topic = await _create_topic(unit_env)
        first = await service.create_comment(topic.id, user_id, "One")
        second = await service.create_comment(topic.id, user_id, "Two")

        # Act
        comments = await service.get_comments(topic.id, CommentSortOrder.NEW)

        # Assert
        assert [c.id for c in comments] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_get_comment_tree_nests_replies(self, unit_env, user_id):
        """Replies appear under their parent."""
        # Arrange
        service = await unit_env.get(CommentService)
        topic = await _create_topic(unit_env)
        root = await service.create_comment(topic.id, user_id, "Root")
        reply = await service.create_comment(
            topic.id, user_id, "Reply", parent_id=root.id
        )

        # Act
        tree = await service.get_comment_tree(topic.id)

        # Assert
        assert len(tree) == 1
        assert tree[0].comment.id == root.id
        assert [n.comment.id for n in tree[0].children] == [reply.id]
