"""Create topic use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import TopicService
from forum.domain.value import UserId, parse_uuid

from .common import TopicItem


class CreateTopicRequest(BaseModel):
    """Create topic request."""

    title: str
    author_id: str  # UUID string


class CreateTopicResponse(BaseModel):
    """Create topic response."""

    topic: TopicItem


class CreateTopicUseCase(BaseUseCase[CreateTopicRequest, CreateTopicResponse]):
    """Use case for creating a topic."""

    def __init__(self, topic_service: TopicService) -> None:
        """Initialize create topic use case.

        Args:
            topic_service: Topic domain service
        """
        self.topic_service = topic_service

    async def execute(self, request: CreateTopicRequest) -> CreateTopicResponse:
        """Execute create topic flow.

        Args:
            request: Create topic request

        Returns:
            Created topic with net_score 1 and no comments

        Raises:
            ValidationError: If the title is blank or the author ID is malformed
        """
        author_id = UserId(parse_uuid(request.author_id, "author_id"))
        topic = await self.topic_service.create_topic(request.title, author_id)
        return CreateTopicResponse(topic=TopicItem.from_domain(topic))
