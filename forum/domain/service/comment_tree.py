"""Comment ordering and thread tree construction."""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from forum.domain.model.comment import Comment
from forum.domain.model.common import INITIAL_NET_SCORE
from forum.domain.value import CommentId, CommentSortOrder

from .base import Service


@dataclass
class CommentNode:
    """Node in a comment thread.

    Represents a comment and its direct replies.
    """

    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)


def controversy(comment: Comment) -> float:
    """How undecided a comment is; lower means more controversial.

    Measured as distance of the score from its starting value, relative to
    the number of votes cast.
    """
    return abs(comment.net_score - INITIAL_NET_SCORE) / (comment.total_votes + 1)


def _sort_key(order: CommentSortOrder) -> Callable[[Comment], tuple]:
    if order == CommentSortOrder.NEW:
        return lambda c: (-c.created_at.timestamp(),)
    if order == CommentSortOrder.TOP:
        return lambda c: (-c.net_score, -c.created_at.timestamp())
    return lambda c: (controversy(c), -c.total_votes, -c.created_at.timestamp())


class CommentTreeBuilder(Service):
    """Sorts flat comment records and assembles them into threads."""

    def sort(
        self,
        comments: Iterable[Comment],
        order: CommentSortOrder = CommentSortOrder.TOP,
    ) -> List[Comment]:
        """Order comments as a flat list.

        - new: newest first
        - top: highest net score first, newer first on ties
        - controversial: closest to neutral relative to votes cast first,
          then more votes, then newer

        Args:
            comments: Comments to order
            order: Sort order

        Returns:
            New sorted list
        """
        return sorted(comments, key=_sort_key(order))

    def build_tree(
        self,
        comments: Iterable[Comment],
        order: CommentSortOrder = CommentSortOrder.TOP,
    ) -> List[CommentNode]:
        """Build the reply tree for a set of comments.

        Algorithm:
        1. Order all comments once, so sibling lists inherit the order
        2. Build adjacency map of parent_id -> [children]
        3. Comments without a parent in the set become roots
        4. Recursively attach replies

        Args:
            comments: Flat comments of one topic
            order: Sort order applied at every level

        Returns:
            Root nodes with children populated recursively
        """
        ordered = self.sort(comments, order)
        known_ids = {comment.id for comment in ordered}

        adjacency: Dict[Optional[CommentId], List[Comment]] = defaultdict(list)
        roots: List[Comment] = []
        for comment in ordered:
            if comment.parent_id is not None and comment.parent_id in known_ids:
                adjacency[comment.parent_id].append(comment)
            else:
                roots.append(comment)

        def build_subtree(comment: Comment) -> CommentNode:
            """Build tree recursively from a comment node."""
            children = [build_subtree(child) for child in adjacency.get(comment.id, [])]
            return CommentNode(comment=comment, children=children)

        return [build_subtree(root) for root in roots]
