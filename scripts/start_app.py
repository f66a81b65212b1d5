#!/usr/bin/env python3
"""Serve the forum API under uvicorn.

Logfire is configured here, before the app factory runs, so failures while
building the container are reported too.
"""

import sys

import logfire
import uvicorn

from forum.config import Settings
from forum.util.observability import configure_logfire


def serve() -> None:
    settings = Settings()
    configure_logfire(settings)

    logfire.info(
        "Serving forum API",
        host=settings.host,
        port=settings.port,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "forum.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Forum API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    serve()
