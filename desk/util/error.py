"""Errors raised while wiring the application."""


class ConfigurationError(Exception):
    """A required setting is missing or unusable at startup.

    Attributes:
        setting: Environment name of the offending setting, e.g. ``IDENTITY__SECRET``
    """

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        super().__init__(f"{setting}: {reason}")
