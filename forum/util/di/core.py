"""Configuration provider."""

from dishka import Scope, provide

from forum.config import Settings
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings for the lifetime of the container."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Settings read from the environment and ``.env``."""
        return Settings()
