"""Logging setup and Logfire instrumentation."""

import logging

import logfire

from evently import __version__
from evently.config import Settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure stdlib logging for the process."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def initialize_logfire(settings: Settings) -> None:
    """
    Initialize Logfire and instrument the MongoDB driver.

    Must be called once at application startup, before the first connection
    is acquired, so that driver commands are traced from the start.

    This function:
    - Configures Logfire with the cloud token
    - Instruments PyMongo (Motor issues its commands through it)
    - Bridges Python logging to Logfire
    """
    if not settings.logfire_token:
        logger.warning("Logfire token not set - observability disabled")
        return

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="evently",
            service_version=__version__,
            environment=settings.environment,
        )

        logfire.instrument_pymongo()

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        logger.info("Logfire tracking initialized")

    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
        # Continue running - observability is optional
