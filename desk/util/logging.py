"""Stdlib logging setup for route modules and third-party libraries."""

import logging
import sys

from desk.config import Settings

# Libraries that log every request or statement at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Route all stdlib loggers to stdout at a level derived from settings.

    Args:
        settings: Application settings (``debug`` selects DEBUG over INFO)
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("desk").setLevel(level)

    logging.getLogger(__name__).info(
        f"Logging ready ({settings.environment}, {logging.getLevelName(level)})"
    )
