"""Topic routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from forum.application.usecase.topic import (
    CreateTopicRequest,
    CreateTopicResponse,
    CreateTopicUseCase,
    GetTopicRequest,
    GetTopicResponse,
    GetTopicUseCase,
    ListTopicsRequest,
    ListTopicsResponse,
    ListTopicsUseCase,
)
from forum.domain.error import DomainError
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/topics", tags=["topics"], route_class=DishkaRoute)


class CreateTopicAPIRequest(BaseModel):
    """API request for creating a topic."""

    title: str
    author_id: str


@router.post(
    "",
    response_model=CreateTopicResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_topic(
    request: CreateTopicAPIRequest,
    create_topic_use_case: FromDishka[CreateTopicUseCase],
) -> CreateTopicResponse:
    """Create a topic.

    Args:
        request: Topic title and author
        create_topic_use_case: Create topic use case from DI

    Returns:
        Created topic

    Raises:
        HTTPException: 400 if the title or author ID is invalid
    """
    try:
        return await create_topic_use_case.execute(
            CreateTopicRequest(title=request.title, author_id=request.author_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "create_topic")


@router.get("", response_model=ListTopicsResponse)
async def list_topics(
    list_topics_use_case: FromDishka[ListTopicsUseCase],
    page: int = 1,
    page_size: int | None = None,
    sort: str = "hot",
    user_id: str | None = None,
) -> ListTopicsResponse:
    """List one page of the topic feed.

    Args:
        list_topics_use_case: List topics use case from DI
        page: 1-based page number
        page_size: Topics per page (default 20, max 100)
        sort: hot, new or top
        user_id: Viewer ID, to include their reaction on each topic

    Returns:
        Topics in feed order

    Raises:
        HTTPException: 400 on invalid paging, sort or user ID
    """
    try:
        return await list_topics_use_case.execute(
            ListTopicsRequest(
                page=page, page_size=page_size, sort=sort, user_id=user_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "list_topics")


@router.get("/{topic_id}", response_model=GetTopicResponse)
async def get_topic(
    topic_id: str,
    get_topic_use_case: FromDishka[GetTopicUseCase],
    user_id: str | None = None,
) -> GetTopicResponse:
    """Get a single topic.

    Raises:
        HTTPException: 404 if the topic does not exist, 400 on malformed IDs
    """
    try:
        return await get_topic_use_case.execute(
            GetTopicRequest(topic_id=topic_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "get_topic")
