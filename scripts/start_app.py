#!/usr/bin/env python3
"""Serve the forum API under uvicorn."""

import sys

import logfire
import uvicorn

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    # Before the app module is imported, so import-time failures are traced
    configure_logfire(settings)

    with logfire.span("forum_api.serve", host=settings.host, port=settings.port):
        try:
            uvicorn.run(
                "forum.interface.api.app:app",
                host=settings.host,
                port=settings.port,
                log_level="debug" if settings.debug else "info",
            )
        except Exception:
            logfire.exception("Forum API failed to start")
            raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
