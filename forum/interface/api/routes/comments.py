"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from forum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from forum.domain.error import DomainError
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/topics", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    author_id: str
    content: str
    parent_id: str | None = None  # Parent comment ID for replies


@router.post(
    "/{topic_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    topic_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Create a comment on a topic or reply to another comment.

    Args:
        topic_id: Topic UUID
        request: Comment content, author and optional parent
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment

    Raises:
        HTTPException: 404 if the topic or parent is missing, 400 on invalid
            input or when the reply would be nested too deep
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                topic_id=topic_id,
                author_id=request.author_id,
                content=request.content,
                parent_id=request.parent_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "create_comment")


@router.get("/{topic_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    topic_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    sort: str = "top",
    user_id: str | None = None,
) -> ListCommentsResponse:
    """List a topic's comments as a flat list.

    Args:
        topic_id: Topic UUID
        list_comments_use_case: List comments use case from DI
        sort: new, top or controversial
        user_id: Viewer ID, to include their reaction on each comment
    """
    try:
        return await list_comments_use_case.execute(
            ListCommentsRequest(topic_id=topic_id, sort=sort, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "list_comments")


@router.get("/{topic_id}/comments/tree", response_model=GetCommentTreeResponse)
async def get_comment_tree(
    topic_id: str,
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
    sort: str = "top",
    user_id: str | None = None,
) -> GetCommentTreeResponse:
    """Get a topic's comments as reply threads."""
    try:
        return await get_comment_tree_use_case.execute(
            GetCommentTreeRequest(topic_id=topic_id, sort=sort, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "get_comment_tree")
