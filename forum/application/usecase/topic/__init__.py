"""Topic use cases."""

from .common import TopicItem
from .create_topic import CreateTopicRequest, CreateTopicResponse, CreateTopicUseCase
from .get_topic import GetTopicRequest, GetTopicResponse, GetTopicUseCase
from .list_topics import ListTopicsRequest, ListTopicsResponse, ListTopicsUseCase

__all__ = [
    "TopicItem",
    "CreateTopicRequest",
    "CreateTopicResponse",
    "CreateTopicUseCase",
    "GetTopicRequest",
    "GetTopicResponse",
    "GetTopicUseCase",
    "ListTopicsRequest",
    "ListTopicsResponse",
    "ListTopicsUseCase",
]
