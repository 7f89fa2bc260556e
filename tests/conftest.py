"""Pytest configuration and fixtures for mongo-init tests."""

import os

import pytest
from pymongo.errors import OperationFailure

from mongo_init.models.user import BootstrapConfig
from mongo_init.utils.constants import DUPLICATE_USER_CODE


# Markers for test categorization
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )


def pytest_collection_modifyitems(config, items):
    """Run integration tests last."""
    items.sort(key=lambda item: item.get_closest_marker("integration") is not None)


class FakeAdminDatabase:
    """In-memory stand-in for the admin database's user commands."""

    def __init__(self, name: str = "admin"):
        self.name = name
        self.users: dict[str, dict] = {}
        self.calls: list[tuple] = []

    def command(self, command, value=1, **kwargs):
        self.calls.append((command, value, kwargs))
        if command == "ping":
            return {"ok": 1.0}
        if command == "createUser":
            if not value:
                raise OperationFailure(
                    "User name must be non-empty", code=2,
                    details={"ok": 0, "errmsg": "User name must be non-empty", "code": 2}
                )
            if value in self.users:
                errmsg = f"User \"{value}@{self.name}\" already exists"
                raise OperationFailure(
                    errmsg, code=DUPLICATE_USER_CODE,
                    details={"ok": 0, "errmsg": errmsg, "code": DUPLICATE_USER_CODE}
                )
            self.users[value] = {"pwd": kwargs.get("pwd"), "roles": kwargs.get("roles")}
            return {"ok": 1.0}
        if command == "updateUser":
            if value not in self.users:
                raise OperationFailure(f"Could not find user \"{value}\"", code=11)
            self.users[value].update(pwd=kwargs.get("pwd"), roles=kwargs.get("roles"))
            return {"ok": 1.0}
        raise OperationFailure(f"no such command: '{command}'", code=59)

    def user_commands(self) -> list[tuple]:
        return [c for c in self.calls if c[0] in ("createUser", "updateUser")]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host MONGODB_* variables out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("MONGODB_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def admin_db():
    """Fake administrative database."""
    return FakeAdminDatabase()


@pytest.fixture
def app_config():
    """Bootstrap config from the reference example."""
    return BootstrapConfig(username="app", password="secret", database="appdb")
