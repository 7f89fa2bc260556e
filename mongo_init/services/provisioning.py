"""User provisioning against the administrative namespace."""

import logging

from pymongo.database import Database
from pymongo.errors import ConnectionFailure, OperationFailure, PyMongoError

from mongo_init.models.user import (
    BootstrapConfig,
    ProvisioningAction,
    ProvisioningResult,
)
from mongo_init.utils.constants import DUPLICATE_USER_CODE, IfExistsPolicy
from mongo_init.utils.exceptions import (
    DatabaseConnectionError,
    UserAlreadyExistsError,
    UserCreationError,
)

logger = logging.getLogger("mongo_init.provisioning")

START_MESSAGE = "Adding New Users"
END_MESSAGE = "End Adding the User Roles."


def create_user(admin_db: Database, config: BootstrapConfig) -> ProvisioningResult:
    """Create the configured principal with a readWrite grant.

    Issues a single createUser command on ``admin_db``. Inputs are not
    validated; the server decides whether they are acceptable.

    Args:
        admin_db: Handle to the administrative database.
        config: Credentials and target database.

    Returns:
        What was done.

    Raises:
        UserAlreadyExistsError: The user exists and the policy is ``fail``.
        UserCreationError: The server rejected the command.
        DatabaseConnectionError: The server could not be reached.
    """
    missing = config.missing_fields()
    if missing:
        logger.warning("Unset bootstrap values: %s", ", ".join(missing))

    logger.info(START_MESSAGE)
    action = ProvisioningAction.CREATED
    try:
        _run_user_command(admin_db, "createUser", config)
    except UserAlreadyExistsError:
        if config.if_exists == IfExistsPolicy.SKIP:
            logger.info("User %r already exists; skipping", config.username)
            action = ProvisioningAction.SKIPPED
        elif config.if_exists == IfExistsPolicy.UPDATE:
            logger.info("User %r already exists; updating", config.username)
            _run_user_command(admin_db, "updateUser", config)
            action = ProvisioningAction.UPDATED
        else:
            raise
    logger.info(END_MESSAGE)

    return ProvisioningResult(
        username=config.username,
        database=config.database,
        action=action,
        roles=config.roles
    )


def _run_user_command(admin_db: Database, name: str, config: BootstrapConfig) -> None:
    try:
        admin_db.command(
            name,
            config.username,
            pwd=config.password,
            roles=config.role_documents()
        )
    except OperationFailure as e:
        if e.code == DUPLICATE_USER_CODE:
            raise UserAlreadyExistsError(config.username) from e
        raise UserCreationError(config.username, _reason(e), command=name) from e
    except ConnectionFailure as e:
        raise DatabaseConnectionError(f"{name} failed: {e}") from e
    except PyMongoError as e:
        raise UserCreationError(config.username, str(e), command=name) from e


def _reason(error: OperationFailure) -> str:
    details = error.details or {}
    return details.get("errmsg") or str(error)
