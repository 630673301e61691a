"""Create comment use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import CommentService
from forum.domain.value import CommentId, TopicId, UserId, parse_uuid

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    topic_id: str  # UUID string
    author_id: str  # UUID string
    content: str
    parent_id: str | None = None  # Parent comment for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CreateCommentResponse]):
    """Use case for creating a comment or a reply."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Parse identifiers
        2. Create the comment (depth derived from the parent)
        3. The topic's comment_count is incremented by the comment service

        Raises:
            NotFoundError: If the topic or parent does not exist
            ValidationError: If input is invalid or nesting is too deep
        """
        topic_id = TopicId(parse_uuid(request.topic_id, "topic_id"))
        author_id = UserId(parse_uuid(request.author_id, "author_id"))
        parent_id = (
            CommentId(parse_uuid(request.parent_id, "parent_id"))
            if request.parent_id
            else None
        )

        comment = await self.comment_service.create_comment(
            topic_id=topic_id,
            author_id=author_id,
            content=request.content,
            parent_id=parent_id,
        )
        return CreateCommentResponse(comment=CommentItem.from_domain(comment))
