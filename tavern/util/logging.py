"""Standard library logging for the API and scripts.

Records from ``logging`` loggers are forwarded to Logfire so that uvicorn
and library messages end up next to the application's spans.
"""

import logging
import sys

import logfire

from tavern.config import Settings

LEVELS = {
    "production": logging.WARNING,
    "staging": logging.INFO,
    "development": logging.INFO,
    "test": logging.WARNING,
}

# Libraries that log every request or query at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for ``settings.environment``."""
    level = logging.DEBUG if settings.debug else LEVELS[settings.environment]

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logging.basicConfig(
        level=level,
        handlers=[console, logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    get_logger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
