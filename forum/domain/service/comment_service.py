"""Comment domain service."""

from typing import List, Optional
from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model.comment import MAX_CONTENT_LENGTH, Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, CommentSortOrder, TopicId, UserId

from .base import Service
from .comment_tree import CommentNode, CommentTreeBuilder
from .topic_service import TopicService

DEFAULT_MAX_DEPTH = 5


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        topic_service: TopicService,
        tree_builder: CommentTreeBuilder,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            topic_service: Topic domain service (owns comment_count)
            tree_builder: Orders comments and builds threads
            max_depth: Deepest allowed reply level
        """
        self.comment_repository = comment_repository
        self.topic_service = topic_service
        self.tree_builder = tree_builder
        self.max_depth = max_depth

    async def create_comment(
        self,
        topic_id: TopicId,
        author_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment on a topic or reply to another comment.

        The topic's comment_count is incremented in the same unit of work.

        Args:
            topic_id: Topic ID
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the topic or parent comment does not exist
            ValidationError: If content is blank or too long, the parent
                belongs to another topic, or the reply would be nested too deep
        """
        with logfire.span(
            "comment_service.create_comment",
            topic_id=str(topic_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if not content.strip():
                raise ValidationError("Comment content cannot be empty")
            if len(content) > MAX_CONTENT_LENGTH:
                raise ValidationError(
                    f"Comment content must be at most {MAX_CONTENT_LENGTH} characters"
                )

            await self.topic_service.get_topic(topic_id)

            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        topic_id=str(topic_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.topic_id != topic_id:
                    logfire.error(
                        "Parent comment does not belong to topic",
                        parent_id=str(parent_id),
                        parent_topic_id=str(parent.topic_id),
                        target_topic_id=str(topic_id),
                    )
                    raise ValidationError("Parent comment does not belong to this topic")
                depth = parent.depth + 1

            if depth > self.max_depth:
                logfire.warn(
                    "Max comment depth reached",
                    parent_id=str(parent_id),
                    depth=depth,
                    max_depth=self.max_depth,
                )
                raise ValidationError("Max comment depth reached")

            comment = Comment(
                id=CommentId(uuid4()),
                topic_id=topic_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                depth=depth,
            )
            saved = await self.comment_repository.save(comment)

            await self.topic_service.increment_comment_count(topic_id)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                topic_id=str(topic_id),
                depth=depth,
            )
            return saved

    async def get_comments(
        self,
        topic_id: TopicId,
        order: CommentSortOrder = CommentSortOrder.TOP,
    ) -> List[Comment]:
        """Get all comments of a topic as a flat sorted list.

        Raises:
            NotFoundError: If topic not found
        """
        with logfire.span(
            "comment_service.get_comments", topic_id=str(topic_id), order=order.value
        ):
            await self.topic_service.get_topic(topic_id)
            comments = await self.comment_repository.find_by_topic(topic_id)
            logfire.info("Comments fetched", topic_id=str(topic_id), count=len(comments))
            return self.tree_builder.sort(comments, order)

    async def get_comment_tree(
        self,
        topic_id: TopicId,
        order: CommentSortOrder = CommentSortOrder.TOP,
    ) -> List[CommentNode]:
        """Get the comment threads of a topic.

        Raises:
            NotFoundError: If topic not found
        """
        with logfire.span(
            "comment_service.get_comment_tree",
            topic_id=str(topic_id),
            order=order.value,
        ):
            await self.topic_service.get_topic(topic_id)
            comments = await self.comment_repository.find_by_topic(topic_id)
            return self.tree_builder.build_tree(comments, order)
