#!/usr/bin/env python3
"""Container entrypoint: set up logging and Logfire, then serve the API."""

import sys

import logfire
import uvicorn

from desk.config import Settings
from desk.util.logging import setup_logging
from desk.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    # Before uvicorn imports the app, so import-time failures are traced too
    configure_logfire(settings)

    logfire.info("Starting desk API", host=settings.host, port=settings.port)
    try:
        uvicorn.run(
            "desk.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "desk API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
