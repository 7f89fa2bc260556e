"""Utility modules for mongo-init."""

from mongo_init.utils.constants import (
    ErrorCode,
    ERROR_MESSAGES,
    IfExistsPolicy,
    DUPLICATE_USER_CODE,
    ADMIN_DATABASE,
    READ_WRITE_ROLE,
)
from mongo_init.utils.exceptions import (
    MongoInitError,
    DatabaseConnectionError,
    UserCreationError,
    UserAlreadyExistsError,
    ConfigurationError,
)

__all__ = [
    "ErrorCode",
    "ERROR_MESSAGES",
    "IfExistsPolicy",
    "DUPLICATE_USER_CODE",
    "ADMIN_DATABASE",
    "READ_WRITE_ROLE",
    "MongoInitError",
    "DatabaseConnectionError",
    "UserCreationError",
    "UserAlreadyExistsError",
    "ConfigurationError",
]
