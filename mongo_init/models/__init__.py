"""Data models for mongo-init."""

from mongo_init.models.user import (
    ProvisioningAction,
    RoleGrant,
    BootstrapConfig,
    ProvisioningResult,
)
from mongo_init.models.database import ConnectionStatus

__all__ = [
    "ProvisioningAction",
    "RoleGrant",
    "BootstrapConfig",
    "ProvisioningResult",
    "ConnectionStatus",
]
