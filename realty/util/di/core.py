"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from realty.config import Settings, TaggingSettings
from realty.domain.value import WeightTable
from realty.util.di.base import ProviderBase
from realty.util.error import ConfigurationError


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_tagging_settings(self, settings: Settings) -> TaggingSettings:
        """Provide tagging settings."""
        return settings.tagging

    @provide(scope=Scope.APP)
    def provide_weight_table(self, tagging: TaggingSettings) -> WeightTable:
        """Provide the weight table, loaded once per process."""
        try:
            return WeightTable.with_overrides(tagging.weights)
        except ValueError as e:
            raise ConfigurationError(f"Invalid tag weights: {e}") from e
