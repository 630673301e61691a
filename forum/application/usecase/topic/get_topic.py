"""Get topic use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import InteractionService, TopicService
from forum.domain.value import TargetType, TopicId, UserId, parse_uuid

from .common import TopicItem


class GetTopicRequest(BaseModel):
    """Get topic request."""

    topic_id: str  # UUID string
    user_id: str | None = None  # Viewer, to include their reaction


class GetTopicResponse(BaseModel):
    """Get topic response."""

    topic: TopicItem


class GetTopicUseCase(BaseUseCase[GetTopicRequest, GetTopicResponse]):
    """Use case for fetching a single topic."""

    def __init__(
        self,
        topic_service: TopicService,
        interaction_service: InteractionService,
    ) -> None:
        """Initialize get topic use case.

        Args:
            topic_service: Topic domain service
            interaction_service: Interaction service for the viewer's reaction
        """
        self.topic_service = topic_service
        self.interaction_service = interaction_service

    async def execute(self, request: GetTopicRequest) -> GetTopicResponse:
        """Execute get topic flow.

        Raises:
            NotFoundError: If topic not found
            ValidationError: If an ID is malformed
        """
        topic_id = TopicId(parse_uuid(request.topic_id, "topic_id"))
        topic = await self.topic_service.get_topic(topic_id)

        viewer_reaction = None
        if request.user_id:
            user_id = UserId(parse_uuid(request.user_id, "user_id"))
            reactions = await self.interaction_service.get_user_reactions(
                user_id, TargetType.TOPIC, [topic.id]
            )
            viewer_reaction = reactions.get(topic.id)

        return GetTopicResponse(
            topic=TopicItem.from_domain(topic, viewer_reaction=viewer_reaction)
        )
