"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from forum.domain.model import Comment, Interaction, Topic
from forum.domain.value import (
    CommentId,
    InteractionId,
    InteractionType,
    TargetType,
    TopicId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_topic(row: Dict[str, Any]) -> Topic:
    """Convert database row to Topic domain model.

    Args:
        row: Database row as dict

    Returns:
        Topic domain model
    """
    return Topic(
        id=TopicId(_uuid(row["id"])),
        title=row["title"],
        author_id=UserId(_uuid(row["author_id"])),
        net_score=row["net_score"],
        comment_count=row["comment_count"],
        total_votes=row["total_votes"],
        heart_count=row["heart_count"],
        created_at=row["created_at"],
    )


def topic_to_dict(topic: Topic) -> Dict[str, Any]:
    """Convert Topic domain model to database dict."""
    return topic.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        topic_id=TopicId(_uuid(row["topic_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        depth=row["depth"],
        net_score=row["net_score"],
        total_votes=row["total_votes"],
        heart_count=row["heart_count"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_interaction(row: Dict[str, Any]) -> Interaction:
    """Convert database row to Interaction domain model.

    Args:
        row: Database row as dict

    Returns:
        Interaction domain model
    """
    return Interaction(
        id=InteractionId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        target_type=TargetType(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        interaction_type=InteractionType(row["interaction_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def interaction_to_dict(interaction: Interaction) -> Dict[str, Any]:
    """Convert Interaction domain model to database dict.

    Enum fields are stored as their string values.
    """
    data = interaction.model_dump()
    data["target_type"] = interaction.target_type.value
    data["interaction_type"] = interaction.interaction_type.value
    return data
