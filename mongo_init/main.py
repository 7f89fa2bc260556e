"""Main entry point for mongo-init."""

import logging
import sys

from mongo_init.config import Settings, load_settings
from mongo_init.models.user import ProvisioningResult
from mongo_init.services.database import (
    create_client,
    get_admin_database,
    check_connection,
    close_client,
)
from mongo_init.services.provisioning import create_user
from mongo_init.services.provisioning import logger as provisioning_logger
from mongo_init.utils.exceptions import DatabaseConnectionError, MongoInitError


logger = logging.getLogger("mongo_init")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send log records to standard output.

    The provisioning start and end lines stay visible at any level.
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    provisioning_logger.setLevel(min(logging.INFO, logging.getLevelName(level)))


def run(settings: Settings) -> ProvisioningResult:
    """Connect to the server and create the configured user.

    Args:
        settings: Application settings.

    Returns:
        The provisioning result.
    """
    logger.info("settings: %s", settings.redacted())

    client = create_client(settings)
    try:
        admin_db = get_admin_database(client, settings.admin_database)
        status = check_connection(admin_db)
        if not status.connected:
            raise DatabaseConnectionError(
                f"Cannot reach MongoDB at {settings.describe_target()}: {status.error}"
            )
        logger.info("Connected to %s (%.1f ms)", status.database, status.latency_ms)

        result = create_user(admin_db, settings.to_bootstrap_config())
        logger.info("User %r %s", result.username, result.action.value)
        return result
    finally:
        close_client(client)


def main() -> int:
    """Main entry point.

    Returns:
        The process exit status.
    """
    try:
        settings = load_settings()
    except MongoInitError as e:
        configure_logging()
        logger.error("[%s] %s", e.code.value, e.message)
        return 1

    configure_logging(settings.log_level)

    try:
        run(settings)
    except MongoInitError as e:
        logger.error("[%s] %s", e.code.value, e.message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
