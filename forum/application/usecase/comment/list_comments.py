"""List comments use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import CommentService, InteractionService
from forum.domain.value import (
    CommentSortOrder,
    TargetType,
    TopicId,
    UserId,
    parse_uuid,
)

from .common import CommentItem


class ListCommentsRequest(BaseModel):
    """List comments request."""

    topic_id: str  # UUID string
    sort: str = CommentSortOrder.TOP.value
    user_id: str | None = None  # Viewer, to include their reactions


class ListCommentsResponse(BaseModel):
    """List comments response."""

    topic_id: str
    comments: list[CommentItem]
    total: int
    sort: CommentSortOrder


class ListCommentsUseCase(BaseUseCase[ListCommentsRequest, ListCommentsResponse]):
    """Use case for listing a topic's comments as a flat sorted list."""

    def __init__(
        self,
        comment_service: CommentService,
        interaction_service: InteractionService,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            interaction_service: Interaction service for viewer reactions
        """
        self.comment_service = comment_service
        self.interaction_service = interaction_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Raises:
            NotFoundError: If topic not found
            ValidationError: If the sort order or an ID is invalid
        """
        sort = CommentSortOrder.parse(request.sort)
        topic_id = TopicId(parse_uuid(request.topic_id, "topic_id"))

        with logfire.span(
            "list_comments.execute", topic_id=str(topic_id), sort=sort.value
        ):
            comments = await self.comment_service.get_comments(topic_id, sort)

            reactions = {}
            if request.user_id and comments:
                user_id = UserId(parse_uuid(request.user_id, "user_id"))
                reactions = await self.interaction_service.get_user_reactions(
                    user_id, TargetType.COMMENT, [c.id for c in comments]
                )

            return ListCommentsResponse(
                topic_id=str(topic_id),
                comments=[
                    CommentItem.from_domain(c, viewer_reaction=reactions.get(c.id))
                    for c in comments
                ],
                total=len(comments),
                sort=sort,
            )
