#!/usr/bin/env python3
"""Upgrade the board schema to the latest Alembic revision."""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from board.config import Settings
from board.util.observability import configure_logfire


def main() -> int:
    """Run ``alembic upgrade`` and report the outcome to Logfire."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", default="alembic.ini", help="Alembic ini file")
    parser.add_argument("--revision", default="head", help="Target revision")
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", revision=args.revision):
        try:
            command.upgrade(Config(args.config), args.revision)
        except Exception as e:
            logfire.error(
                "Schema upgrade failed",
                revision=args.revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # A broken schema must stop the deploy
            raise

    logfire.info("Schema is at revision", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
