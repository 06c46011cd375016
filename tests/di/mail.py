"""Mock mail providers for testing."""

from dishka import Scope, provide

from desk.adapter.mail.sender import MockMailSender
from desk.domain.service import MailSender
from desk.util.di.infrastructure.mail import MailProvider


class MockMailProvider(MailProvider):
    """Mock mail provider recording messages in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mail_sender(self) -> MailSender:
        """Provide recording mail sender."""
        return MockMailSender()
