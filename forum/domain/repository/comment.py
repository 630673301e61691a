"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.comment import Comment
from forum.domain.value import CommentId, TopicId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_topic(self, topic_id: TopicId) -> List[Comment]:
        """Find all comments of a topic as flat records.

        Ordering is left to the caller (see CommentTreeBuilder).

        Args:
            topic_id: The topic ID

        Returns:
            List of comments belonging to the topic
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def adjust_counters(
        self,
        comment_id: CommentId,
        delta: int,
        vote_delta: int = 0,
        heart_delta: int = 0,
    ) -> bool:
        """Atomically add signed deltas to the reaction counters.

        Args:
            comment_id: The comment ID
            delta: Change to net_score
            vote_delta: Change to total_votes
            heart_delta: Change to heart_count

        Returns:
            True if the comment exists and was updated, False otherwise
        """
        pass
