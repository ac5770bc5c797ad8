#!/usr/bin/env python3
"""Upgrade the blog schema before the API starts.

Usage: run_migrations.py [REVISION]   (defaults to "head")
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from blog.config import Settings
from blog.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)
    revision = argv[1] if len(argv) > 1 else "head"

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), revision)
        except Exception as e:
            logfire.error(
                "Schema upgrade failed",
                revision=revision,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Non-zero exit keeps the API from starting on a stale schema
            raise
    logfire.info("Schema at revision", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
