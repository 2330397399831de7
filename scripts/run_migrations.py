#!/usr/bin/env python3
"""Apply the comment store schema with Logfire error tracking."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from natter.config import Settings
from natter.util.observability import configure_logfire


def main() -> int:
    """Upgrade the database to the latest revision."""
    settings = Settings()
    configure_logfire(settings)

    if not settings.database.url:
        logfire.warn("DATABASE__URL is not set; skipping migrations")
        return 0

    try:
        logfire.info("Starting database migrations")
        command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # The app must not start against a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
