"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentTreeUseCase,
    ListCommentsUseCase,
)
from forum.application.usecase.interaction import ReactUseCase
from forum.application.usecase.topic import (
    CreateTopicUseCase,
    GetTopicUseCase,
    ListTopicsUseCase,
)
from forum.config import FeedSettings
from forum.domain.service import (
    CommentService,
    FeedRanker,
    InteractionService,
    TopicService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Topic use cases
    @provide
    def get_create_topic_use_case(
        self, topic_service: TopicService
    ) -> CreateTopicUseCase:
        """Provide create topic use case."""
        return CreateTopicUseCase(topic_service=topic_service)

    @provide
    def get_get_topic_use_case(
        self,
        topic_service: TopicService,
        interaction_service: InteractionService,
    ) -> GetTopicUseCase:
        """Provide get topic use case."""
        return GetTopicUseCase(
            topic_service=topic_service, interaction_service=interaction_service
        )

    @provide
    def get_list_topics_use_case(
        self,
        topic_service: TopicService,
        interaction_service: InteractionService,
        feed_ranker: FeedRanker,
        feed_settings: FeedSettings,
    ) -> ListTopicsUseCase:
        """Provide list topics use case."""
        return ListTopicsUseCase(
            topic_service=topic_service,
            interaction_service=interaction_service,
            feed_ranker=feed_ranker,
            feed_settings=feed_settings,
        )

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_list_comments_use_case(
        self,
        comment_service: CommentService,
        interaction_service: InteractionService,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, interaction_service=interaction_service
        )

    @provide
    def get_comment_tree_use_case(
        self,
        comment_service: CommentService,
        interaction_service: InteractionService,
    ) -> GetCommentTreeUseCase:
        """Provide get comment tree use case."""
        return GetCommentTreeUseCase(
            comment_service=comment_service, interaction_service=interaction_service
        )

    # Interaction use cases
    @provide
    def get_react_use_case(
        self, interaction_service: InteractionService
    ) -> ReactUseCase:
        """Provide react use case."""
        return ReactUseCase(interaction_service=interaction_service)
