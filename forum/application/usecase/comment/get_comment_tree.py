"""Get comment tree use case."""

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

from .common import CommentNodeResponse


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    topic_id: str  # UUID string
    sort: str = CommentSortOrder.TOP.value
    user_id: str | None = None


class GetCommentTreeResponse(BaseModel):
    """Get comment tree response."""

    topic_id: str
    roots: list[CommentNodeResponse]
    total: int
    sort: CommentSortOrder


def _flatten(nodes):
    for node in nodes:
        yield node.comment
        yield from _flatten(node.children)


class GetCommentTreeUseCase(BaseUseCase[GetCommentTreeRequest, GetCommentTreeResponse]):
    """Use case for getting a topic's comments as reply threads.

    Siblings are ordered by the requested sort at every level.
    """

    def __init__(
        self,
        comment_service: CommentService,
        interaction_service: InteractionService,
    ) -> None:
        """Initialize get comment tree use case.

        Args:
            comment_service: Comment domain service
            interaction_service: Interaction service for viewer reactions
        """
        self.comment_service = comment_service
        self.interaction_service = interaction_service

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow.

        Raises:
            NotFoundError: If topic not found
            ValidationError: If the sort order or an ID is invalid
        """
        sort = CommentSortOrder.parse(request.sort)
        topic_id = TopicId(parse_uuid(request.topic_id, "topic_id"))

        roots = await self.comment_service.get_comment_tree(topic_id, sort)
        comments = list(_flatten(roots))

        reactions = {}
        if request.user_id and comments:
            user_id = UserId(parse_uuid(request.user_id, "user_id"))
            reactions = await self.interaction_service.get_user_reactions(
                user_id, TargetType.COMMENT, [c.id for c in comments]
            )

        return GetCommentTreeResponse(
            topic_id=str(topic_id),
            roots=[CommentNodeResponse.from_node(root, reactions) for root in roots],
            total=len(comments),
            sort=sort,
        )
