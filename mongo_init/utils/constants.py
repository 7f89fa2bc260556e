"""Constants for mongo-init."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error code enumeration."""

    DB_CONNECTION_FAILED = "ERR_001"
    USER_CREATION_FAILED = "ERR_002"
    USER_ALREADY_EXISTS = "ERR_003"
    INVALID_CONFIGURATION = "ERR_004"


class IfExistsPolicy(str, Enum):
    """What to do when the principal already exists."""

    FAIL = "fail"
    SKIP = "skip"
    UPDATE = "update"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.DB_CONNECTION_FAILED: "Unable to connect to the configured MongoDB server",
    ErrorCode.USER_CREATION_FAILED: "User creation failed",
    ErrorCode.USER_ALREADY_EXISTS: "User already exists",
    ErrorCode.INVALID_CONFIGURATION: "Configuration is invalid",
}

# Server error code returned by createUser for a duplicate principal
DUPLICATE_USER_CODE = 51003

ADMIN_DATABASE = "admin"
READ_WRITE_ROLE = "readWrite"
