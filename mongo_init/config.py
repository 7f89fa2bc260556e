"""Configuration management for mongo-init."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings
from typing import Literal, Optional
from urllib.parse import quote_plus

from mongo_init.models.user import BootstrapConfig
from mongo_init.utils.constants import ADMIN_DATABASE, IfExistsPolicy
from mongo_init.utils.exceptions import ConfigurationError


SECRET_FIELDS = {"password", "root_password", "uri"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Principal to create. Left unset rather than defaulted.
    user: Optional[str] = None
    password: Optional[str] = None
    database: Optional[str] = None

    # MongoDB connection configuration
    uri: str = ""
    host: str = "localhost"
    port: int = 27017
    root_user: str = ""
    root_password: str = ""
    admin_database: str = ADMIN_DATABASE
    server_api_version: Literal["1", ""] = "1"
    timeout_ms: int = Field(default=5000, description="Server selection timeout in ms")

    # Provisioning behaviour
    if_exists: IfExistsPolicy = IfExistsPolicy.FAIL

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    class Config:
        env_prefix = "MONGODB_"
        env_file = ".env"
        extra = "ignore"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    def get_uri(self) -> str:
        """Get the MongoDB connection string.

        Returns:
            The URI for connecting to the server.
        """
        if self.uri:
            return self.uri
        credentials = ""
        if self.root_user:
            credentials = (
                f"{quote_plus(self.root_user)}:{quote_plus(self.root_password)}@"
            )
        return f"mongodb://{credentials}{self.host}:{self.port}/"

    def describe_target(self) -> str:
        """Server location safe to show in messages."""
        if self.uri:
            return "the server named by MONGODB_URI"
        return f"{self.host}:{self.port}"

    def to_bootstrap_config(self) -> BootstrapConfig:
        """Build the explicit config passed to the bootstrap procedure."""
        return BootstrapConfig(
            username=self.user,
            password=self.password,
            database=self.database,
            if_exists=self.if_exists,
        )

    def redacted(self) -> dict:
        """Settings safe to log."""
        return self.model_dump(exclude=SECRET_FIELDS)


def load_settings(**overrides) -> Settings:
    """Load settings from the environment.

    Args:
        overrides: Explicit values taking precedence over the environment.

    Returns:
        The loaded settings.

    Raises:
        ConfigurationError: If a value fails validation.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            f"Invalid settings: {', '.join(fields)}",
            details={"fields": fields}
        ) from e
