"""Per-role default permission bundles."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .types import DataScope, Permission, Role


@dataclass(frozen=True)
class PermissionPreset:
    """Fully populated permission table plus a default data scope.

    Every ``Permission`` has an explicit slot, so a lookup can never miss.
    """

    flags: Mapping[Permission, bool]
    scope: DataScope

    def __post_init__(self) -> None:
        table = {permission: bool(self.flags.get(permission, False)) for permission in Permission}
        object.__setattr__(self, "flags", MappingProxyType(table))

    @classmethod
    def granting(cls, grants: Iterable[Permission], *, scope: DataScope) -> PermissionPreset:
        granted = frozenset(grants)
        return cls(
            flags={permission: permission in granted for permission in Permission},
            scope=scope,
        )

    def allows(self, permission: Permission) -> bool:
        return self.flags[permission]

    @property
    def granted(self) -> frozenset[Permission]:
        return frozenset(permission for permission, allowed in self.flags.items() if allowed)

    def to_document(self) -> dict[str, object]:
        """Flat ``{key: bool, ..., "scope": value}`` form stored on user records."""

        document: dict[str, object] = {
            permission.value: allowed for permission, allowed in self.flags.items()
        }
        document["scope"] = self.scope.value
        return document


_COACH_GRANTS: frozenset[Permission] = frozenset(
    {
        Permission.ACCESS_DASHBOARD,
        Permission.ACCESS_MY_PIRS,
        Permission.ACCESS_GOALS,
        Permission.ACCESS_COMMUNITY,
        Permission.ACCESS_COMMUNICATION,
        Permission.ACCESS_MEETINGS,
        Permission.ACCESS_TEMPLATES,
        Permission.ACCESS_CHECKINS,
        Permission.ACCESS_ALERTS,
        Permission.ACCESS_REPORTS,
        Permission.ACCESS_LOGS,
        Permission.ACTION_CREATE_GOAL,
        Permission.ACTION_CREATE_ASSIGNMENT,
        Permission.ACTION_SEND_MESSAGE,
    }
)

_ADMIN_GRANTS: frozenset[Permission] = _COACH_GRANTS | {
    Permission.ACCESS_USERS,
    Permission.ACCESS_FEEDBACK,
    Permission.ACCESS_RESOURCES,
    Permission.ACTION_CREATE_PIR,
    Permission.ACTION_DELETE_PIR,
    Permission.ACTION_CREATE_RESOURCE,
    Permission.ACTION_DELETE_RESOURCE,
    Permission.ACTION_CREATE_COACH,
    Permission.ACTION_EXPORT_DATA,
    Permission.ACTION_IMPERSONATE,
}

_SUPERADMIN1_GRANTS: frozenset[Permission] = _ADMIN_GRANTS | {
    Permission.ACCESS_SETTINGS,
    Permission.ACCESS_AUDIT_LOGS,
    Permission.ACTION_CREATE_ADMIN,
    Permission.ACTION_CREATE_SUPERADMIN1,
    Permission.ACTION_MODIFY_SETTINGS,
    Permission.ACTION_VIEW_AUDIT_LOGS,
}

COACH_PRESET = PermissionPreset.granting(_COACH_GRANTS, scope=DataScope.ASSIGNED_PIRS)
ADMIN_PRESET = PermissionPreset.granting(_ADMIN_GRANTS, scope=DataScope.ALL_PIRS_TENANT)
SUPERADMIN1_PRESET = PermissionPreset.granting(
    _SUPERADMIN1_GRANTS,
    scope=DataScope.ALL_PIRS_TENANT,
)
# Most restrictive bundle, used for PIRs and anything without a named preset.
RESTRICTED_PRESET = PermissionPreset.granting((), scope=DataScope.OWN_DATA)


@dataclass(frozen=True)
class PresetRegistry:
    """Immutable role -> preset table, built once and injected into resolvers."""

    presets: Mapping[Role, PermissionPreset] = field(default_factory=dict)
    fallback: PermissionPreset = RESTRICTED_PRESET

    def __post_init__(self) -> None:
        object.__setattr__(self, "presets", MappingProxyType(dict(self.presets)))

    def for_role(self, role: Role | None) -> PermissionPreset:
        if role is None:
            return self.fallback
        return self.presets.get(role, self.fallback)


DEFAULT_PRESETS = PresetRegistry(
    presets={
        Role.SUPERADMIN1: SUPERADMIN1_PRESET,
        Role.ADMIN: ADMIN_PRESET,
        Role.COACH: COACH_PRESET,
    },
)


def default_permissions(role: Role | str | None) -> PermissionPreset:
    """Return the default bundle for ``role`` from the production registry."""

    return DEFAULT_PRESETS.for_role(Role.coerce(role))


__all__ = [
    "ADMIN_PRESET",
    "COACH_PRESET",
    "DEFAULT_PRESETS",
    "PermissionPreset",
    "PresetRegistry",
    "RESTRICTED_PRESET",
    "SUPERADMIN1_PRESET",
    "default_permissions",
]
