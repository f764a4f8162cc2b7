#!/usr/bin/env python3
"""Upgrade the post_blobs schema.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to ``head``. The database comes from DATABASE__URL.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from quickblog.config import Settings
from quickblog.util.logging import setup_logging
from quickblog.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database to the requested revision."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    revision = argv[0] if argv else "head"
    database = make_url(settings.database_url).render_as_string(hide_password=True)

    with logfire.span("run_migrations", revision=revision, database=database):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Post store migration failed",
                revision=revision,
                error=str(e),
                _exc_info=True,
            )
            # A failed upgrade fails the deploy
            raise

    logfire.info("Post store schema is at revision", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
