"""FastAPI dependencies that bridge HTTP requests to the access engine.

The identity layer authenticates the request and binds an :class:`Actor` on
``request.state``; these dependencies only read it and ask the engine.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request

from glrs_access.common.logging import bind_actor_context
from glrs_access.core.auth.actor import Actor
from glrs_access.core.errors import AuthenticationError, PermissionDeniedError
from glrs_access.core.rbac.types import ACCESS_PREFIX, ACTION_PREFIX, DataScope, Permission
from glrs_access.features.rbac.service import AccessService, build_access_service
from glrs_access.settings import Settings, get_settings

SettingsDep = Annotated[Settings, Depends(get_settings)]

PermissionDependency = Callable[..., Actor]


def get_access_service(settings: SettingsDep) -> AccessService:
    """Return the access service configured from settings."""

    return build_access_service(settings)


ServiceDep = Annotated[AccessService, Depends(get_access_service)]


async def get_current_actor(request: Request, settings: SettingsDep) -> Actor:
    """Return the actor bound by the identity layer, or fail with 401."""

    actor = getattr(request.state, settings.actor_state_attribute, None)
    if not isinstance(actor, Actor):
        raise AuthenticationError("Authentication required")
    bind_actor_context(actor.id)
    return actor


ActorDep = Annotated[Actor, Depends(get_current_actor)]


def require_permission(permission: Permission | str) -> PermissionDependency:
    """Return a dependency enforcing ``permission``.

    The key is validated when the route is declared, so a typo fails at
    import time instead of silently denying every request.
    """

    key = Permission.parse(permission)

    def dependency(actor: ActorDep, service: ServiceDep) -> Actor:
        if not service.has_permission(actor, key):
            raise PermissionDeniedError(
                key.value,
                role=actor.role.value if actor.role else None,
                tenant_id=actor.tenant_id,
            )
        return actor

    return dependency


def require_page(page_name: str) -> PermissionDependency:
    return require_permission(f"{ACCESS_PREFIX}{page_name}")


def require_action(action_name: str) -> PermissionDependency:
    return require_permission(f"{ACTION_PREFIX}{action_name}")


def get_data_scope(actor: ActorDep, service: ServiceDep) -> DataScope:
    """Resolve the actor's data scope for the query layer."""

    return service.data_scope(actor)


__all__ = [
    "ActorDep",
    "ServiceDep",
    "get_access_service",
    "get_current_actor",
    "get_data_scope",
    "require_action",
    "require_page",
    "require_permission",
]
