#!/usr/bin/env python3
"""Serve the comment API under uvicorn."""

import sys

import logfire
import uvicorn

from natter.config import Settings
from natter.util.observability import configure_logfire


def main() -> int:
    """Configure Logfire, then hand over to uvicorn until shutdown."""
    settings = Settings()
    configure_logfire(settings)

    if not settings.database.url:
        logfire.warn("DATABASE__URL is not set; comment storage is disabled")

    try:
        logfire.info(
            "Starting comment API",
            host=settings.host,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "natter.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Comment API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
