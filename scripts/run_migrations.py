#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f9a2d7e40
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from realty.config import Settings
from realty.util.observability import configure_logfire

ROOT = Path(__file__).resolve().parent.parent


def main(argv: list[str]) -> int:
    """Upgrade the schema to the requested revision (head by default)."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[0] if argv else "head"
    database = make_url(settings.database_url)

    alembic_cfg = Config(str(ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(ROOT / "migrations"))

    with logfire.span(
        "migrations.upgrade",
        revision=revision,
        host=database.host,
        database=database.database,
    ):
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
            # Fail the deploy rather than serve against a stale schema
            raise

    logfire.info("Database migrations applied", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
