"""RBAC type definitions used across the engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..errors import UnknownPermissionError

ACCESS_PREFIX = "access_"
ACTION_PREFIX = "action_"


class Role(str, enum.Enum):
    """Closed set of portal roles, least privileged first."""

    PIR = "pir"
    COACH = "coach"
    ADMIN = "admin"
    SUPERADMIN1 = "superadmin1"
    SUPERADMIN = "superadmin"

    @property
    def rank(self) -> int:
        from .registry import ROLE_HIERARCHY

        return ROLE_HIERARCHY[self]

    @classmethod
    def coerce(cls, value: object) -> Role | None:
        """Return the role whose value matches exactly, or ``None``.

        No case folding or trimming: ``"SuperAdmin"`` is not a role.
        """

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class DataScope(str, enum.Enum):
    """Breadth of data an actor may query, widest first."""

    ALL_TENANTS = "all_tenants"
    ALL_PIRS_TENANT = "all_pirs_tenant"
    ASSIGNED_PIRS = "assigned_pirs"
    OWN_DATA = "own_data"

    @property
    def breadth(self) -> int:
        # Informational only; the query layer honours it, the resolvers do not.
        return _SCOPE_BREADTH[self]

    @classmethod
    def coerce(cls, value: object) -> DataScope | None:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


_SCOPE_BREADTH: dict[DataScope, int] = {
    DataScope.ALL_TENANTS: 4,
    DataScope.ALL_PIRS_TENANT: 3,
    DataScope.ASSIGNED_PIRS: 2,
    DataScope.OWN_DATA: 1,
}


class PermissionKind(str, enum.Enum):
    """Namespace of a permission key."""

    ACCESS = "access"
    ACTION = "action"


class Permission(str, enum.Enum):
    """Every page-access and action flag the portal knows about."""

    # Page access
    ACCESS_DASHBOARD = "access_dashboard"
    ACCESS_USERS = "access_users"
    ACCESS_MY_PIRS = "access_my_pirs"
    ACCESS_FEEDBACK = "access_feedback"
    ACCESS_RESOURCES = "access_resources"
    ACCESS_GOALS = "access_goals"
    ACCESS_TASKS = "access_tasks"
    ACCESS_GUIDES = "access_guides"
    ACCESS_COMMUNITY = "access_community"
    ACCESS_COMMUNICATION = "access_communication"
    ACCESS_MEETINGS = "access_meetings"
    ACCESS_TEMPLATES = "access_templates"
    ACCESS_CHECKINS = "access_checkins"
    ACCESS_ALERTS = "access_alerts"
    ACCESS_REPORTS = "access_reports"
    ACCESS_LOGS = "access_logs"
    ACCESS_SETTINGS = "access_settings"
    ACCESS_AUDIT_LOGS = "access_audit_logs"
    # Actions - PIR management
    ACTION_CREATE_PIR = "action_create_pir"
    ACTION_EDIT_PIR = "action_edit_pir"
    ACTION_DELETE_PIR = "action_delete_pir"
    # Actions - resource management
    ACTION_CREATE_RESOURCE = "action_create_resource"
    ACTION_EDIT_RESOURCE = "action_edit_resource"
    ACTION_DELETE_RESOURCE = "action_delete_resource"
    # Actions - staff management
    ACTION_CREATE_COACH = "action_create_coach"
    ACTION_EDIT_COACH = "action_edit_coach"
    ACTION_CREATE_ADMIN = "action_create_admin"
    ACTION_EDIT_ADMIN = "action_edit_admin"
    ACTION_CREATE_SUPERADMIN1 = "action_create_superadmin1"
    # Actions - settings and analytics
    ACTION_MODIFY_SETTINGS = "action_modify_settings"
    ACTION_EXPORT_DATA = "action_export_data"
    ACTION_VIEW_ANALYTICS = "action_view_analytics"
    ACTION_VIEW_AUDIT_LOGS = "action_view_audit_logs"
    ACTION_IMPERSONATE = "action_impersonate"
    # Actions - communication and community
    ACTION_CREATE_GOAL = "action_create_goal"
    ACTION_CREATE_ASSIGNMENT = "action_create_assignment"
    ACTION_SEND_MESSAGE = "action_send_message"
    ACTION_SEND_BROADCAST = "action_send_broadcast"
    ACTION_MANAGE_COMMUNITY = "action_manage_community"

    @property
    def kind(self) -> PermissionKind:
        if self.value.startswith(ACCESS_PREFIX):
            return PermissionKind.ACCESS
        return PermissionKind.ACTION

    @property
    def bare_name(self) -> str:
        """Key without its namespace prefix (``access_users`` -> ``users``)."""

        prefix = ACCESS_PREFIX if self.kind is PermissionKind.ACCESS else ACTION_PREFIX
        return self.value.removeprefix(prefix)

    @classmethod
    def coerce(cls, value: object) -> Permission | None:
        """Lenient lookup: unknown keys map to ``None`` instead of raising."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        return _PERMISSION_BY_KEY.get(value)

    @classmethod
    def parse(cls, value: str | Permission) -> Permission:
        """Strict lookup for configuration and seeding code."""

        permission = cls.coerce(value)
        if permission is None:
            raise UnknownPermissionError(str(value))
        return permission

    @classmethod
    def for_page(cls, page_name: str) -> Permission | None:
        return cls.coerce(f"{ACCESS_PREFIX}{page_name}")

    @classmethod
    def for_action(cls, action_name: str) -> Permission | None:
        return cls.coerce(f"{ACTION_PREFIX}{action_name}")


_PERMISSION_BY_KEY: dict[str, Permission] = {member.value: member for member in Permission}


@dataclass(frozen=True)
class PermissionDef:
    """Static catalogue entry for a permission."""

    permission: Permission
    label: str
    description: str

    @property
    def key(self) -> str:
        return self.permission.value

    @property
    def kind(self) -> PermissionKind:
        return self.permission.kind


__all__ = [
    "ACCESS_PREFIX",
    "ACTION_PREFIX",
    "DataScope",
    "Permission",
    "PermissionDef",
    "PermissionKind",
    "Role",
]
