#!/usr/bin/env python3
"""Upgrade the Tavern schema, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to ``head``. The database comes from DATABASE__URL.
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from tavern.config import Settings
from tavern.util.logging import setup_logging
from tavern.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    revision = argv[0] if argv else "head"
    alembic_cfg = Config(str(ALEMBIC_INI))

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(alembic_cfg, revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve against a half-migrated schema
            raise

    logfire.info("Database migrated", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
