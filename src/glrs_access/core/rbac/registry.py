"""Canonical permission catalogue and role hierarchy.

The catalogue is closed: every key the portal checks is listed here, and
nothing registers permissions at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .types import Permission, PermissionDef, PermissionKind, Role


def _permission(permission: Permission, *, label: str, description: str) -> PermissionDef:
    return PermissionDef(permission=permission, label=label, description=description)


PERMISSIONS: tuple[PermissionDef, ...] = (
    # Page access --------------------------------------------------------
    _permission(
        Permission.ACCESS_DASHBOARD,
        label="Dashboard",
        description="Open the staff dashboard with caseload summaries.",
    ),
    _permission(
        Permission.ACCESS_USERS,
        label="Users",
        description="Browse and manage staff and PIR accounts.",
    ),
    _permission(
        Permission.ACCESS_MY_PIRS,
        label="My PIRs",
        description="Open the caseload view of PIRs assigned to the actor.",
    ),
    _permission(
        Permission.ACCESS_FEEDBACK,
        label="Feedback",
        description="Read feedback submitted by PIRs (legacy, merged into logs).",
    ),
    _permission(
        Permission.ACCESS_RESOURCES,
        label="Resources",
        description="Manage the shared resource library.",
    ),
    _permission(
        Permission.ACCESS_GOALS,
        label="Goals",
        description="Review and manage PIR goals.",
    ),
    _permission(
        Permission.ACCESS_TASKS,
        label="Tasks",
        description="Open the task and assignment workspace.",
    ),
    _permission(
        Permission.ACCESS_GUIDES,
        label="Guides",
        description="Open the staff guides section.",
    ),
    _permission(
        Permission.ACCESS_COMMUNITY,
        label="Community",
        description="Moderate community posts and support groups.",
    ),
    _permission(
        Permission.ACCESS_COMMUNICATION,
        label="Communication",
        description="Open messaging and group communication tools.",
    ),
    _permission(
        Permission.ACCESS_MEETINGS,
        label="Meetings",
        description="Schedule meetings and track attendance.",
    ),
    _permission(
        Permission.ACCESS_TEMPLATES,
        label="Templates",
        description="Manage goal and assignment templates.",
    ),
    _permission(
        Permission.ACCESS_CHECKINS,
        label="Check-ins",
        description="Review daily check-ins.",
    ),
    _permission(
        Permission.ACCESS_ALERTS,
        label="Alerts",
        description="Review and respond to crisis alerts.",
    ),
    _permission(
        Permission.ACCESS_REPORTS,
        label="Reports",
        description="Open reports (legacy, merged into logs).",
    ),
    _permission(
        Permission.ACCESS_LOGS,
        label="Logs",
        description="Open the merged reports, feedback and activity logs page.",
    ),
    _permission(
        Permission.ACCESS_SETTINGS,
        label="Settings",
        description="Open tenant settings.",
    ),
    _permission(
        Permission.ACCESS_AUDIT_LOGS,
        label="Audit logs",
        description="Open the audit log viewer (legacy, merged into logs).",
    ),
    # Actions: PIR management --------------------------------------------
    _permission(
        Permission.ACTION_CREATE_PIR,
        label="Create PIRs",
        description="Onboard a new PIR into the tenant.",
    ),
    _permission(
        Permission.ACTION_EDIT_PIR,
        label="Edit PIRs",
        description="Update PIR profiles and assignments.",
    ),
    _permission(
        Permission.ACTION_DELETE_PIR,
        label="Delete PIRs",
        description="Remove a PIR account.",
    ),
    # Actions: resource management ---------------------------------------
    _permission(
        Permission.ACTION_CREATE_RESOURCE,
        label="Create resources",
        description="Add items to the resource library.",
    ),
    _permission(
        Permission.ACTION_EDIT_RESOURCE,
        label="Edit resources",
        description="Update items in the resource library.",
    ),
    _permission(
        Permission.ACTION_DELETE_RESOURCE,
        label="Delete resources",
        description="Remove items from the resource library.",
    ),
    # Actions: staff management ------------------------------------------
    _permission(
        Permission.ACTION_CREATE_COACH,
        label="Create coaches",
        description="Invite a new coach.",
    ),
    _permission(
        Permission.ACTION_EDIT_COACH,
        label="Edit coaches",
        description="Update coach profiles and capacity.",
    ),
    _permission(
        Permission.ACTION_CREATE_ADMIN,
        label="Create admins",
        description="Invite a new tenant administrator.",
    ),
    _permission(
        Permission.ACTION_EDIT_ADMIN,
        label="Edit admins",
        description="Update administrator accounts.",
    ),
    _permission(
        Permission.ACTION_CREATE_SUPERADMIN1,
        label="Create tenant super admins",
        description="Invite another tenant-level super admin.",
    ),
    # Actions: settings and analytics ------------------------------------
    _permission(
        Permission.ACTION_MODIFY_SETTINGS,
        label="Modify settings",
        description="Change tenant configuration.",
    ),
    _permission(
        Permission.ACTION_EXPORT_DATA,
        label="Export data",
        description="Download tenant data exports.",
    ),
    _permission(
        Permission.ACTION_VIEW_ANALYTICS,
        label="View analytics",
        description="Open aggregate analytics.",
    ),
    _permission(
        Permission.ACTION_VIEW_AUDIT_LOGS,
        label="View audit logs",
        description="Read audit trail entries.",
    ),
    _permission(
        Permission.ACTION_IMPERSONATE,
        label="Impersonate",
        description="View the portal as another user.",
    ),
    # Actions: communication and community -------------------------------
    _permission(
        Permission.ACTION_CREATE_GOAL,
        label="Create goals",
        description="Create goals for PIRs.",
    ),
    _permission(
        Permission.ACTION_CREATE_ASSIGNMENT,
        label="Create assignments",
        description="Assign tasks to PIRs.",
    ),
    _permission(
        Permission.ACTION_SEND_MESSAGE,
        label="Send messages",
        description="Send direct messages to PIRs.",
    ),
    _permission(
        Permission.ACTION_SEND_BROADCAST,
        label="Send broadcasts",
        description="Send a broadcast to every PIR in scope.",
    ),
    _permission(
        Permission.ACTION_MANAGE_COMMUNITY,
        label="Manage community",
        description="Ban users, review flagged content and manage groups.",
    ),
)

PERMISSION_REGISTRY: Mapping[Permission, PermissionDef] = MappingProxyType(
    {definition.permission: definition for definition in PERMISSIONS}
)

# Page names in catalogue order, e.g. "dashboard", "my_pirs".
PAGES: tuple[str, ...] = tuple(
    definition.permission.bare_name
    for definition in PERMISSIONS
    if definition.kind is PermissionKind.ACCESS
)

ACTIONS: tuple[str, ...] = tuple(
    definition.permission.bare_name
    for definition in PERMISSIONS
    if definition.kind is PermissionKind.ACTION
)

# Higher number = more privileged. Informational; resolvers never compare ranks.
ROLE_HIERARCHY: Mapping[Role, int] = MappingProxyType(
    {
        Role.PIR: 1,
        Role.COACH: 2,
        Role.ADMIN: 3,
        Role.SUPERADMIN1: 4,
        Role.SUPERADMIN: 5,
    }
)


def rank(role: Role) -> int:
    """Return the hierarchy rank of ``role``."""

    return ROLE_HIERARCHY[role]


__all__ = [
    "ACTIONS",
    "PAGES",
    "PERMISSIONS",
    "PERMISSION_REGISTRY",
    "ROLE_HIERARCHY",
    "rank",
]
