"""Mail infrastructure providers."""

from dishka import Scope, provide

from desk.adapter.mail.sender import SMTPMailSender
from desk.config import MailSettings
from desk.domain.service import MailSender
from desk.util.di.base import ProviderBase


class MailProvider(ProviderBase):
    """Mail component base."""

    __mock_component__ = "mail"


class ProdMailProvider(MailProvider):
    """Production mail provider using SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mail_sender(self, mail_settings: MailSettings) -> MailSender:
        """Provide SMTP mail sender."""
        return SMTPMailSender(settings=mail_settings)
