"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from forum.config import CommentSettings, FeedSettings, RankingSettings, Settings
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_ranking_settings(self, settings: Settings) -> RankingSettings:
        """Provide feed ranking settings."""
        return settings.ranking

    @provide
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        """Provide feed pagination settings."""
        return settings.feed

    @provide
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment threading settings."""
        return settings.comments
