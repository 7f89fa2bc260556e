"""User provisioning data models."""

from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional, Any

from mongo_init.utils.constants import IfExistsPolicy, READ_WRITE_ROLE


class ProvisioningAction(str, Enum):
    """Outcome of a provisioning run."""

    CREATED = "created"
    UPDATED = "updated"
    SKIPPED = "skipped"


class RoleGrant(BaseModel):
    """Role granted to the new principal."""

    role: str = READ_WRITE_ROLE
    db: Optional[str] = Field(..., description="Database the role applies to")


class BootstrapConfig(BaseModel):
    """Credentials for the principal to create.

    Values are passed to the server as given: an unset variable stays
    ``None`` and nothing is substituted for it.
    """

    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    database: Optional[str] = None
    if_exists: IfExistsPolicy = IfExistsPolicy.FAIL

    @property
    def roles(self) -> list[RoleGrant]:
        return [RoleGrant(db=self.database)]

    def role_documents(self) -> list[dict[str, Any]]:
        """Roles in the form expected by createUser/updateUser."""
        return [grant.model_dump() for grant in self.roles]

    def missing_fields(self) -> list[str]:
        return [
            name for name in ("username", "password", "database")
            if not getattr(self, name)
        ]


class ProvisioningResult(BaseModel):
    """Result of the bootstrap procedure."""

    username: Optional[str]
    database: Optional[str]
    action: ProvisioningAction
    roles: list[RoleGrant] = []
