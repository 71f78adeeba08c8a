"""Permission and data-scope resolution.

Both resolvers are pure functions of the actor snapshot they are given. They
never raise and never log a decision; anything they cannot make sense of
resolves to the least-privileged outcome.
"""

from __future__ import annotations

import logging

from glrs_access.common.logging import log_context
from glrs_access.core.auth.actor import Actor, UserPermissionOverrides
from glrs_access.core.rbac.policy import DEFAULT_BYPASS, BypassPolicy
from glrs_access.core.rbac.presets import DEFAULT_PRESETS, PermissionPreset, PresetRegistry
from glrs_access.core.rbac.registry import PAGES, PERMISSIONS
from glrs_access.core.rbac.types import (
    ACCESS_PREFIX,
    ACTION_PREFIX,
    DataScope,
    Permission,
    Role,
)
from glrs_access.settings import Settings

from .schemas import AccessSummary, PermissionOut

logger = logging.getLogger(__name__)

PermissionLike = Permission | str


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


class PermissionResolver:
    """Decide whether an actor holds a permission.

    Precedence, first match wins: absent actor (deny), bypass role (grant),
    explicit overrides, role preset, deny.
    """

    def __init__(
        self,
        *,
        presets: PresetRegistry = DEFAULT_PRESETS,
        bypass: BypassPolicy = DEFAULT_BYPASS,
        merge_partial_overrides: bool = False,
    ) -> None:
        self.presets = presets
        self.bypass = bypass
        self.merge_partial_overrides = merge_partial_overrides

    def has_permission(self, actor: Actor | None, permission: PermissionLike) -> bool:
        """Resolve ``permission`` for ``actor``.

        Keys outside the catalogue are ``False`` for every actor, bypass
        roles included.
        """

        if actor is None:
            return False

        key = Permission.coerce(permission)
        if key is None:
            return False

        if self.bypass.applies(actor.role):
            return True

        overrides = actor.permissions
        if overrides is not None:
            explicit = overrides.granted(key)
            if explicit is not None or not self.merge_partial_overrides:
                return explicit is True

        return self.presets.for_role(actor.role).allows(key)


class ScopeResolver:
    """Decide how much data an actor's queries may span."""

    def __init__(
        self,
        *,
        presets: PresetRegistry = DEFAULT_PRESETS,
        bypass: BypassPolicy = DEFAULT_BYPASS,
    ) -> None:
        self.presets = presets
        self.bypass = bypass

    def data_scope(self, actor: Actor | None) -> DataScope:
        if actor is None:
            return DataScope.OWN_DATA

        bypass_scope = self.bypass.scope_for(actor.role)
        if bypass_scope is not None:
            return bypass_scope

        overrides = actor.permissions
        if overrides is not None and overrides.scope is not None:
            return overrides.scope

        # admin -> all_pirs_tenant, coach -> assigned_pirs, everyone else -> own_data
        return self.presets.for_role(actor.role).scope


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class AccessService:
    """Entry point bundling both resolvers around one registry and bypass policy."""

    def __init__(
        self,
        *,
        presets: PresetRegistry = DEFAULT_PRESETS,
        bypass: BypassPolicy = DEFAULT_BYPASS,
        merge_partial_overrides: bool = False,
    ) -> None:
        self.presets = presets
        self.bypass = bypass
        self.permissions = PermissionResolver(
            presets=presets,
            bypass=bypass,
            merge_partial_overrides=merge_partial_overrides,
        )
        self.scopes = ScopeResolver(presets=presets, bypass=bypass)

    # Decisions ----------------------------------------------------------

    def has_permission(self, actor: Actor | None, permission: PermissionLike) -> bool:
        return self.permissions.has_permission(actor, permission)

    def can_access_page(self, actor: Actor | None, page_name: str) -> bool:
        return self.has_permission(actor, f"{ACCESS_PREFIX}{page_name}")

    def can_perform_action(self, actor: Actor | None, action_name: str) -> bool:
        return self.has_permission(actor, f"{ACTION_PREFIX}{action_name}")

    def data_scope(self, actor: Actor | None) -> DataScope:
        return self.scopes.data_scope(actor)

    def default_permissions(self, role: Role | str | None) -> PermissionPreset:
        return self.presets.for_role(Role.coerce(role))

    # Helpers ------------------------------------------------------------

    def is_super_admin(self, actor: Actor | None) -> bool:
        return actor is not None and actor.role is Role.SUPERADMIN

    def is_super_admin1(self, actor: Actor | None) -> bool:
        return actor is not None and actor.role is Role.SUPERADMIN1

    def can_edit_permissions(self, actor: Actor | None) -> bool:
        """Only bypass roles may edit other users' overrides."""

        return actor is not None and self.bypass.applies(actor.role)

    def can_access_tenant(self, actor: Actor | None, tenant_id: str | None) -> bool:
        if actor is None:
            return False
        if self.bypass.scope_for(actor.role) is DataScope.ALL_TENANTS:
            return True
        return tenant_id is not None and actor.tenant_id == tenant_id

    def role_at_least(self, actor: Actor | None, minimum: Role) -> bool:
        if actor is None or actor.role is None:
            return False
        return actor.role.rank >= minimum.rank

    def effective_permissions(self, actor: Actor | None) -> frozenset[Permission]:
        return frozenset(
            permission for permission in Permission if self.has_permission(actor, permission)
        )

    def visible_pages(self, actor: Actor | None) -> tuple[str, ...]:
        return tuple(page for page in PAGES if self.can_access_page(actor, page))

    def ensure_permissions(self, actor: Actor | None) -> Actor | None:
        """Return ``actor`` with its role preset materialized when it has no overrides."""

        if actor is None or actor.permissions is not None:
            return actor

        preset = self.default_permissions(actor.role)
        logger.warning(
            "rbac.actor.preset_applied",
            extra=log_context(
                actor_id=actor.id,
                tenant_id=actor.tenant_id,
                role=actor.role.value if actor.role else None,
            ),
        )
        materialized = UserPermissionOverrides(flags=dict(preset.flags), scope=preset.scope)
        return actor.model_copy(update={"permissions": materialized})

    def describe_access(self, actor: Actor | None) -> AccessSummary:
        role = actor.role if actor is not None else None
        return AccessSummary(
            actor_id=actor.id if actor is not None else None,
            role=role,
            rank=role.rank if role is not None else None,
            tenant_id=actor.tenant_id if actor is not None else None,
            scope=self.data_scope(actor),
            can_edit_permissions=self.can_edit_permissions(actor),
            permissions={
                permission.value: self.has_permission(actor, permission)
                for permission in Permission
            },
            pages=list(self.visible_pages(actor)),
        )


def permission_catalog() -> list[PermissionOut]:
    """Catalogue entries in display order, for the permission editor."""

    return [
        PermissionOut(
            key=definition.key,
            kind=definition.kind.value,
            name=definition.permission.bare_name,
            label=definition.label,
            description=definition.description,
        )
        for definition in PERMISSIONS
    ]


def build_access_service(settings: Settings) -> AccessService:
    return AccessService(merge_partial_overrides=settings.merge_partial_overrides)


# ---------------------------------------------------------------------------
# Module-level guards backed by the production registry
# ---------------------------------------------------------------------------

_DEFAULT_SERVICE = AccessService()


def get_default_service() -> AccessService:
    return _DEFAULT_SERVICE


def has_permission(actor: Actor | None, permission: PermissionLike) -> bool:
    return _DEFAULT_SERVICE.has_permission(actor, permission)


def can_access_page(actor: Actor | None, page_name: str) -> bool:
    return _DEFAULT_SERVICE.can_access_page(actor, page_name)


def can_perform_action(actor: Actor | None, action_name: str) -> bool:
    return _DEFAULT_SERVICE.can_perform_action(actor, action_name)


def data_scope(actor: Actor | None) -> DataScope:
    return _DEFAULT_SERVICE.data_scope(actor)


def is_super_admin(actor: Actor | None) -> bool:
    return _DEFAULT_SERVICE.is_super_admin(actor)


def is_super_admin1(actor: Actor | None) -> bool:
    return _DEFAULT_SERVICE.is_super_admin1(actor)


def can_edit_permissions(actor: Actor | None) -> bool:
    return _DEFAULT_SERVICE.can_edit_permissions(actor)


def can_access_tenant(actor: Actor | None, tenant_id: str | None) -> bool:
    return _DEFAULT_SERVICE.can_access_tenant(actor, tenant_id)


def role_at_least(actor: Actor | None, minimum: Role) -> bool:
    return _DEFAULT_SERVICE.role_at_least(actor, minimum)


def effective_permissions(actor: Actor | None) -> frozenset[Permission]:
    return _DEFAULT_SERVICE.effective_permissions(actor)


def visible_pages(actor: Actor | None) -> tuple[str, ...]:
    return _DEFAULT_SERVICE.visible_pages(actor)


def ensure_permissions(actor: Actor | None) -> Actor | None:
    return _DEFAULT_SERVICE.ensure_permissions(actor)


def describe_access(actor: Actor | None) -> AccessSummary:
    return _DEFAULT_SERVICE.describe_access(actor)


__all__ = [
    "AccessService",
    "PermissionLike",
    "PermissionResolver",
    "ScopeResolver",
    "build_access_service",
    "can_access_page",
    "can_access_tenant",
    "can_edit_permissions",
    "can_perform_action",
    "data_scope",
    "describe_access",
    "effective_permissions",
    "ensure_permissions",
    "get_default_service",
    "has_permission",
    "is_super_admin",
    "is_super_admin1",
    "permission_catalog",
    "role_at_least",
    "visible_pages",
]
