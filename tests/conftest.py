"""Shared pytest fixtures for the access engine tests."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from glrs_access.core.auth.actor import Actor, UserPermissionOverrides
from glrs_access.core.rbac.types import Role
from glrs_access.settings import reload_settings

ActorFactory = Callable[..., Actor]


@pytest.fixture()
def make_actor() -> ActorFactory:
    """Build actors with sensible defaults for a single tenant."""

    def _make(
        role: Role | str | None = Role.COACH,
        *,
        actor_id: str = "user-1",
        tenant_id: str | None = "glrs",
        permissions: dict[str, Any] | UserPermissionOverrides | None = None,
        assigned_coach: str | None = None,
    ) -> Actor:
        overrides = permissions
        if isinstance(permissions, dict):
            overrides = UserPermissionOverrides.model_validate(permissions)
        return Actor(
            id=actor_id,
            role=role,
            tenant_id=tenant_id,
            permissions=overrides,
            assigned_coach=assigned_coach,
        )

    return _make


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep GLRS_* variables from the host out of cached settings."""

    for key in list(os.environ):
        if key.startswith("GLRS_"):
            monkeypatch.delenv(key, raising=False)
    reload_settings()
    yield
    reload_settings()
