"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import CommentSettings, RankingSettings
from forum.domain.repository import (
    CommentRepository,
    InteractionRepository,
    TopicRepository,
)
from forum.domain.service import (
    CommentService,
    CommentTreeBuilder,
    FeedRanker,
    InteractionService,
    ScoreAggregator,
    TopicService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Services that touch repositories are REQUEST-scoped to align with the
    session lifecycle. Stateless helpers are APP-scoped.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_feed_ranker(self, ranking: RankingSettings) -> FeedRanker:
        """Provide feed ranker configured from ranking settings."""
        return FeedRanker(gravity=ranking.gravity, time_offset=ranking.time_offset)

    @provide(scope=Scope.APP)
    def get_comment_tree_builder(self) -> CommentTreeBuilder:
        """Provide comment tree builder."""
        return CommentTreeBuilder()

    @provide
    def get_topic_service(self, topic_repository: TopicRepository) -> TopicService:
        """Provide topic domain service."""
        return TopicService(topic_repository=topic_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        topic_service: TopicService,
        tree_builder: CommentTreeBuilder,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            topic_service=topic_service,
            tree_builder=tree_builder,
            max_depth=comment_settings.max_depth,
        )

    @provide
    def get_score_aggregator(
        self,
        topic_repository: TopicRepository,
        comment_repository: CommentRepository,
    ) -> ScoreAggregator:
        """Provide score aggregator."""
        return ScoreAggregator(
            topic_repository=topic_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_interaction_service(
        self,
        interaction_repository: InteractionRepository,
        topic_repository: TopicRepository,
        comment_repository: CommentRepository,
        score_aggregator: ScoreAggregator,
    ) -> InteractionService:
        """Provide interaction ledger service."""
        return InteractionService(
            interaction_repository=interaction_repository,
            topic_repository=topic_repository,
            comment_repository=comment_repository,
            score_aggregator=score_aggregator,
        )
