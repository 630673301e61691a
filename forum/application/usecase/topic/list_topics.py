"""List topics use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.config import FeedSettings
from forum.domain.error import ValidationError
from forum.domain.model.common import utcnow
from forum.domain.service import FeedRanker, InteractionService, TopicService
from forum.domain.value import TargetType, TopicSortOrder, UserId, parse_uuid

from .common import TopicItem


class ListTopicsRequest(BaseModel):
    """List topics request."""

    page: int = 1  # 1-based
    page_size: int | None = None  # Defaults to feed.default_page_size
    sort: str = TopicSortOrder.HOT.value
    user_id: str | None = None  # Viewer, to include their reactions


class ListTopicsResponse(BaseModel):
    """List topics response."""

    topics: list[TopicItem]
    total: int
    page: int
    page_size: int
    sort: TopicSortOrder


class ListTopicsUseCase(BaseUseCase[ListTopicsRequest, ListTopicsResponse]):
    """Use case for listing one page of the topic feed."""

    def __init__(
        self,
        topic_service: TopicService,
        interaction_service: InteractionService,
        feed_ranker: FeedRanker,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize list topics use case.

        Args:
            topic_service: Topic domain service
            interaction_service: Interaction service for viewer reactions
            feed_ranker: Computes hot scores for the response
            feed_settings: Pagination defaults and limits
        """
        self.topic_service = topic_service
        self.interaction_service = interaction_service
        self.feed_ranker = feed_ranker
        self.feed_settings = feed_settings

    async def execute(self, request: ListTopicsRequest) -> ListTopicsResponse:
        """Execute list topics flow.

        Args:
            request: Page, page size, sort order and optional viewer

        Returns:
            One page of topics, ranked before pagination

        Raises:
            ValidationError: If paging parameters or the sort order are invalid
        """
        sort = TopicSortOrder.parse(request.sort)
        page_size = (
            request.page_size
            if request.page_size is not None
            else self.feed_settings.default_page_size
        )
        if request.page < 1:
            raise ValidationError("page must be >= 1")
        if not 1 <= page_size <= self.feed_settings.max_page_size:
            raise ValidationError(
                f"page_size must be between 1 and {self.feed_settings.max_page_size}"
            )

        with logfire.span(
            "list_topics.execute", sort=sort.value, page=request.page, page_size=page_size
        ):
            # One reference time for ordering and reported scores
            now = utcnow()
            total = await self.topic_service.count_topics()
            topics = await self.topic_service.list_topics(
                sort=sort,
                limit=page_size,
                offset=(request.page - 1) * page_size,
                now=now,
            )

            reactions = {}
            if request.user_id and topics:
                user_id = UserId(parse_uuid(request.user_id, "user_id"))
                reactions = await self.interaction_service.get_user_reactions(
                    user_id, TargetType.TOPIC, [topic.id for topic in topics]
                )

            items = [
                TopicItem.from_domain(
                    topic,
                    viewer_reaction=reactions.get(topic.id),
                    hot_score=self.feed_ranker.score(topic, now),
                )
                for topic in topics
            ]

            logfire.info("Topics listed", count=len(items), total=total)

            return ListTopicsResponse(
                topics=items,
                total=total,
                page=request.page,
                page_size=page_size,
                sort=sort,
            )
