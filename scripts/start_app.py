#!/usr/bin/env python3
"""Serve the Tavern API with uvicorn.

Startup failures (bad settings, unreachable port) are reported to Logfire
before the process exits.
"""

import sys

import logfire
import uvicorn

from tavern.config import Settings
from tavern.util.logging import get_logger, setup_logging
from tavern.util.observability import configure_logfire

logger = get_logger(__name__)


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logger.info(
        "Serving Tavern API on %s (%s)", settings.api.base_url, settings.environment
    )

    try:
        uvicorn.run(
            "tavern.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_config=None,
            proxy_headers=settings.environment not in ("test", "development"),
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
