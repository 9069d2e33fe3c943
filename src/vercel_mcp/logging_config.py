"""Logging and error-reporting setup."""
import logging
import sys
from typing import Optional

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from .config import Settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Verbosity per deployment environment; anything else logs at DEBUG
ENVIRONMENT_LEVELS = {
    "production": logging.INFO,
    "staging": logging.DEBUG,
    "development": logging.DEBUG,
}


def log_level_for(environment: Optional[str]) -> int:
    return ENVIRONMENT_LEVELS.get(environment or "", logging.DEBUG)


def configure_logging(settings: Settings) -> logging.Logger:
    """Configure root logging to stderr and, if a DSN is set, Sentry reporting."""
    logging.basicConfig(
        level=log_level_for(settings.node_env),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True
    )
    logger = logging.getLogger("vercel-mcp")

    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.node_env or "production",
            integrations=[LoggingIntegration(level=logging.INFO, event_level=logging.ERROR)],
        )
        logger.info("Error reporting enabled")

    return logger
