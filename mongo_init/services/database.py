"""Database connection services."""

import logging
import time
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConfigurationError as DriverConfigurationError
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from mongo_init.config import Settings
from mongo_init.models.database import ConnectionStatus
from mongo_init.utils.constants import ADMIN_DATABASE
from mongo_init.utils.exceptions import ConfigurationError

logger = logging.getLogger("mongo_init.database")


def create_client(settings: Settings) -> MongoClient:
    """Create a MongoDB client.

    The driver connects lazily, so no network traffic happens here.

    Args:
        settings: Application settings.

    Returns:
        A pymongo client.

    Raises:
        ConfigurationError: If the driver rejects the URI or options.
    """
    server_api: Optional[ServerApi] = None
    try:
        if settings.server_api_version:
            server_api = ServerApi(settings.server_api_version)

        client = MongoClient(
            settings.get_uri(),
            serverSelectionTimeoutMS=settings.timeout_ms,
            server_api=server_api
        )
    except (DriverConfigurationError, ValueError) as e:
        raise ConfigurationError(
            f"Invalid connection settings: {e}",
            details={"target": settings.describe_target()}
        ) from e
    logger.debug("Created client for %s", settings.describe_target())
    return client


def get_admin_database(client: MongoClient, name: str = ADMIN_DATABASE) -> Database:
    """Get the administrative database handle.

    Args:
        client: The client to use.
        name: Name of the administrative namespace.

    Returns:
        The database used for user management commands.
    """
    return client.get_database(name)


def check_connection(database: Database) -> ConnectionStatus:
    """Check if the server answers a ping.

    Args:
        database: The database handle to ping through.

    Returns:
        The connection status; never raises on driver errors.
    """
    try:
        start_time = time.perf_counter()
        database.command("ping")
        latency_ms = (time.perf_counter() - start_time) * 1000
        return ConnectionStatus(
            database=database.name,
            connected=True,
            latency_ms=latency_ms
        )
    except PyMongoError as e:
        return ConnectionStatus(
            database=database.name,
            connected=False,
            error=str(e)
        )


def close_client(client: MongoClient) -> None:
    """Close a client.

    Args:
        client: The client to close.
    """
    client.close()
