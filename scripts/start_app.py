#!/usr/bin/env python3
"""Serve the board API under uvicorn, reporting startup failures to Logfire."""

import sys
from pathlib import Path

import logfire
import uvicorn

from board.config import Settings
from board.util.logging import setup_logging
from board.util.observability import configure_logfire


def main() -> int:
    """Prepare logging and the upload directory, then run uvicorn."""
    settings = Settings()

    # Logfire first so that import errors in the app module are captured
    configure_logfire(settings)
    setup_logging(settings)

    try:
        upload_dir = Path(settings.storage.upload_dir)
        upload_dir.mkdir(parents=True, exist_ok=True)

        logfire.info(
            "Starting board API",
            environment=settings.environment,
            upload_dir=str(upload_dir.resolve()),
            git_sha=settings.git_sha,
        )

        # The app module calls create_app() at import time
        uvicorn.run(
            "board.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Board API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
