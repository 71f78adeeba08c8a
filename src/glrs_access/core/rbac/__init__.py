"""RBAC contracts and registries shared across features."""

from .policy import BYPASS_SCOPES, DEFAULT_BYPASS, BypassPolicy
from .presets import (
    ADMIN_PRESET,
    COACH_PRESET,
    DEFAULT_PRESETS,
    RESTRICTED_PRESET,
    SUPERADMIN1_PRESET,
    PermissionPreset,
    PresetRegistry,
    default_permissions,
)
from .registry import ACTIONS, PAGES, PERMISSION_REGISTRY, PERMISSIONS, ROLE_HIERARCHY, rank
from .types import DataScope, Permission, PermissionDef, PermissionKind, Role

__all__ = [
    "ACTIONS",
    "ADMIN_PRESET",
    "BYPASS_SCOPES",
    "COACH_PRESET",
    "DEFAULT_BYPASS",
    "DEFAULT_PRESETS",
    "PAGES",
    "PERMISSIONS",
    "PERMISSION_REGISTRY",
    "RESTRICTED_PRESET",
    "ROLE_HIERARCHY",
    "SUPERADMIN1_PRESET",
    "BypassPolicy",
    "DataScope",
    "Permission",
    "PermissionDef",
    "PermissionKind",
    "PermissionPreset",
    "PresetRegistry",
    "Role",
    "default_permissions",
    "rank",
]
