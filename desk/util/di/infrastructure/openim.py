"""OpenIM infrastructure providers."""

from dishka import Scope, provide

from desk.adapter.openim.client import OpenIMClient, RealOpenIMClient
from desk.config import IdentitySettings
from desk.util.di.base import ProviderBase
from desk.util.error import ConfigurationError


class OpenIMProvider(ProviderBase):
    """OpenIM component base."""

    __mock_component__ = "openim"


class ProdOpenIMProvider(OpenIMProvider):
    """Production OpenIM provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_openim_client(self, identity_settings: IdentitySettings) -> OpenIMClient:
        """Provide OpenIM client.

        Raises:
            ConfigurationError: If the OpenIM secret is not configured
        """
        if not identity_settings.secret:
            raise ConfigurationError(
                "IDENTITY__SECRET", "required for OpenIM admin calls"
            )

        return RealOpenIMClient(
            base_url=identity_settings.base_url,
            timeout=identity_settings.timeout_seconds,
        )
