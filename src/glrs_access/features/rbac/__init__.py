"""Permission, scope and filter resolution for portal actors."""

from .filters import ScopeColumns, apply_scope, is_in_scope, scope_predicate
from .schemas import AccessSummary, PermissionOut
from .service import (
    AccessService,
    PermissionResolver,
    ScopeResolver,
    build_access_service,
    can_access_page,
    can_access_tenant,
    can_edit_permissions,
    can_perform_action,
    data_scope,
    describe_access,
    effective_permissions,
    ensure_permissions,
    get_default_service,
    has_permission,
    is_super_admin,
    is_super_admin1,
    permission_catalog,
    role_at_least,
    visible_pages,
)

__all__ = [
    "AccessService",
    "AccessSummary",
    "PermissionOut",
    "PermissionResolver",
    "ScopeColumns",
    "ScopeResolver",
    "apply_scope",
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
    "is_in_scope",
    "is_super_admin",
    "is_super_admin1",
    "permission_catalog",
    "role_at_least",
    "scope_predicate",
    "visible_pages",
]
