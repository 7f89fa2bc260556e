"""Exception classes for mongo-init."""

from mongo_init.utils.constants import ErrorCode, ERROR_MESSAGES


class MongoInitError(Exception):
    """Base exception class for mongo-init."""

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        details: dict | None = None
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, "Unknown error")
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert the exception to a dictionary format.

        Returns:
            A dictionary representation of the error.
        """
        return {
            "status": "error",
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": self.details
            }
        }


class DatabaseConnectionError(MongoInitError):
    """Database connection error."""

    def __init__(self, message: str):
        super().__init__(
            code=ErrorCode.DB_CONNECTION_FAILED,
            message=message
        )


class UserCreationError(MongoInitError):
    """A createUser or updateUser command failed."""

    def __init__(
        self,
        username: str | None,
        reason: str,
        code: ErrorCode = ErrorCode.USER_CREATION_FAILED,
        command: str = "createUser"
    ):
        action = "update" if command == "updateUser" else "create"
        super().__init__(
            code=code,
            message=f"Failed to {action} user {username!r}: {reason}",
            details={"user": username, "command": command}
        )


class UserAlreadyExistsError(UserCreationError):
    """The principal is already present in the admin namespace."""

    def __init__(self, username: str | None):
        super().__init__(
            username,
            reason="user already exists",
            code=ErrorCode.USER_ALREADY_EXISTS
        )


class ConfigurationError(MongoInitError):
    """Invalid settings."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(
            code=ErrorCode.INVALID_CONFIGURATION,
            message=message,
            details=details
        )
