"""Domain model entities for the forum."""

from forum.domain.model.comment import Comment
from forum.domain.model.interaction import Interaction
from forum.domain.model.common import INITIAL_NET_SCORE
from forum.domain.model.topic import Topic

__all__ = [
    "Topic",
    "Comment",
    "Interaction",
    "INITIAL_NET_SCORE",
]
