"""Authorization and data-scope resolution for the GLRS coaching portal."""

from glrs_access.core.auth import (
    AccessError,
    Actor,
    AuthenticationError,
    PermissionDeniedError,
    UnknownPermissionError,
    UserPermissionOverrides,
)
from glrs_access.core.rbac import (
    DEFAULT_BYPASS,
    DEFAULT_PRESETS,
    ROLE_HIERARCHY,
    BypassPolicy,
    DataScope,
    Permission,
    PermissionPreset,
    PresetRegistry,
    Role,
    default_permissions,
    rank,
)
from glrs_access.features.rbac import (
    AccessService,
    can_access_page,
    can_access_tenant,
    can_edit_permissions,
    can_perform_action,
    data_scope,
    describe_access,
    effective_permissions,
    ensure_permissions,
    has_permission,
    is_in_scope,
    is_super_admin,
    is_super_admin1,
    role_at_least,
    visible_pages,
)

__all__ = [
    "DEFAULT_BYPASS",
    "DEFAULT_PRESETS",
    "ROLE_HIERARCHY",
    "AccessError",
    "AccessService",
    "Actor",
    "AuthenticationError",
    "BypassPolicy",
    "DataScope",
    "Permission",
    "PermissionDeniedError",
    "PermissionPreset",
    "PresetRegistry",
    "Role",
    "UnknownPermissionError",
    "UserPermissionOverrides",
    "can_access_page",
    "can_access_tenant",
    "can_edit_permissions",
    "can_perform_action",
    "data_scope",
    "default_permissions",
    "describe_access",
    "effective_permissions",
    "ensure_permissions",
    "has_permission",
    "is_in_scope",
    "is_super_admin",
    "is_super_admin1",
    "rank",
    "role_at_least",
    "visible_pages",
]
