#!/usr/bin/env python3
"""Apply forum schema migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a given revision
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def upgrade(revision: str = "head") -> None:
    """Upgrade the forum database to revision.

    Raises:
        Exception: Whatever alembic raised; the deploy must stop on a
            broken schema
    """
    settings = Settings()
    configure_logfire(settings)

    config = Config(str(ALEMBIC_INI))
    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(config, revision)
        except Exception as e:
            logfire.error(
                "Forum migrations failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise
    logfire.info("Forum schema up to date", revision=revision)


if __name__ == "__main__":
    upgrade(sys.argv[1] if len(sys.argv) > 1 else "head")
