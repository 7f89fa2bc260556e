"""Service modules for mongo-init."""

from mongo_init.services.database import (
    create_client,
    get_admin_database,
    check_connection,
    close_client,
)
from mongo_init.services.provisioning import (
    create_user,
    START_MESSAGE,
    END_MESSAGE,
)

__all__ = [
    # Database
    "create_client",
    "get_admin_database",
    "check_connection",
    "close_client",
    # Provisioning
    "create_user",
    "START_MESSAGE",
    "END_MESSAGE",
]
