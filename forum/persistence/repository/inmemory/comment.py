"""In-memory comment repository for testing."""

from typing import Optional

from forum.domain.model.comment import Comment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import CommentId, TopicId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_topic(self, topic_id: TopicId) -> list[Comment]:
        """Find all comments of a topic."""
        comments = [c for c in self._comments.values() if c.topic_id == topic_id]
        return sorted(comments, key=lambda c: c.created_at)

    async def count_by_topic(self, topic_id: TopicId) -> int:
        """Count comments of a topic (test inspection only)."""
        return sum(1 for c in self._comments.values() if c.topic_id == topic_id)

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._comments[comment.id] = comment
        return comment

    async def adjust_counters(
        self,
        comment_id: CommentId,
        delta: int,
        vote_delta: int = 0,
        heart_delta: int = 0,
    ) -> bool:
        """Add deltas to the reaction counters."""
        comment = self._comments.get(comment_id)
        if not comment:
            return False
        self._comments[comment_id] = comment.with_counter_deltas(
            delta, vote_delta, heart_delta
        )
        return True
