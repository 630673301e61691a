"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentNode, CommentTreeBuilder
from .interaction_service import InteractionService
from .ranking import FeedRanker, ranking_score
from .score_service import ScoreAggregator
from .topic_service import TopicService

__all__ = [
    "CommentNode",
    "CommentService",
    "CommentTreeBuilder",
    "FeedRanker",
    "InteractionService",
    "ScoreAggregator",
    "Service",
    "TopicService",
    "ranking_score",
]
