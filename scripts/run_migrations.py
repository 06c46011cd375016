#!/usr/bin/env python3
"""Upgrade the account database to the latest Alembic revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from desk.config import Settings
from desk.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", environment=settings.environment):
        try:
            command.upgrade(Config(ALEMBIC_INI), "head")
        except Exception as e:
            logfire.error(
                "Migrations failed, refusing to start on a stale schema",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise
        logfire.info("Database at head revision")
    return 0


if __name__ == "__main__":
    sys.exit(main())
