"""Errors raised by outbound adapters (OpenIM, SMTP)."""


class AdapterError(Exception):
    """Base error for adapters."""

    pass


class ProviderError(AdapterError):
    """An external service was unreachable or answered outside its protocol.

    Subclasses set ``provider`` so logs can tell the services apart.
    """

    provider: str = "external"
