"""Standard-library logging for the API process and scripts.

Application telemetry goes through Logfire; this only decides what the
``quickblog`` loggers and the server's own loggers print to stdout.
"""

import logging
import sys

from quickblog.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Libraries that log every request or query at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def log_level_for(settings: Settings) -> int:
    """Pick the quickblog log level for an environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route quickblog and uvicorn logs to stdout.

    Request access lines are only shown in debug mode, and SQL echo follows
    the same switch.

    Args:
        settings: Application settings
    """
    level = log_level_for(settings)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    quiet = logging.DEBUG if settings.debug else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet)

    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    logging.getLogger("uvicorn").setLevel(level)
    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("quickblog").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s (posts under %s)",
        settings.environment,
        logging.getLevelName(level),
        settings.api.prefix,
    )
