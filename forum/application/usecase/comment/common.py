"""Comment response models shared by comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import Comment
from forum.domain.service import CommentNode
from forum.domain.value import InteractionType


class CommentItem(BaseModel):
    """Comment in API responses."""

    comment_id: str
    topic_id: str
    author_id: str
    content: str
    parent_id: str | None
    depth: int
    net_score: int
    total_votes: int
    heart_count: int
    created_at: datetime
    viewer_reaction: InteractionType | None = None

    @classmethod
    def from_domain(
        cls, comment: Comment, viewer_reaction: InteractionType | None = None
    ) -> "CommentItem":
        """Convert a domain comment to its response model."""
        return cls(
            comment_id=str(comment.id),
            topic_id=str(comment.topic_id),
            author_id=str(comment.author_id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            net_score=comment.net_score,
            total_votes=comment.total_votes,
            heart_count=comment.heart_count,
            created_at=comment.created_at,
            viewer_reaction=viewer_reaction,
        )


class CommentNodeResponse(CommentItem):
    """Comment tree node for API response.

    Recursive structure mirroring the domain CommentNode.
    """

    children: list["CommentNodeResponse"] = []

    @classmethod
    def from_node(
        cls,
        node: CommentNode,
        reactions: dict | None = None,
    ) -> "CommentNodeResponse":
        """Convert a domain CommentNode to response model.

        Args:
            node: Domain comment node
            reactions: Viewer reactions keyed by comment ID

        Returns:
            API response model with children recursively converted
        """
        reactions = reactions or {}
        item = CommentItem.from_domain(
            node.comment, viewer_reaction=reactions.get(node.comment.id)
        )
        return cls(
            **item.model_dump(),
            children=[cls.from_node(child, reactions) for child in node.children],
        )
