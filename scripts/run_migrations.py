#!/usr/bin/env python3
"""Upgrade the forum schema to the latest revision.

Run from the repository root, where ``alembic.ini`` lives.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.logging import get_logger, setup_logging
from forum.util.observability import configure_logfire

logger = get_logger(__name__)


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("forum_schema.upgrade", revision="head"):
        logger.info("Upgrading forum schema")
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception:
            logfire.exception("Forum schema upgrade failed")
            raise
        logfire.info("Forum schema is at head")
    return 0


if __name__ == "__main__":
    sys.exit(main())
