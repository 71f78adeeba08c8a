from __future__ import annotations

from glrs_access.common.schema import BaseSchema
from glrs_access.core.rbac.types import DataScope, Role


class AccessSummary(BaseSchema):
    """Resolved access for one actor, as handed to the portal front end."""

    actor_id: str | None
    role: Role | None
    rank: int | None
    tenant_id: str | None
    scope: DataScope
    can_edit_permissions: bool
    permissions: dict[str, bool]
    pages: list[str]


class PermissionOut(BaseSchema):
    """Catalogue entry for display in the permission editor."""

    key: str
    kind: str
    name: str
    label: str
    description: str


__all__ = ["AccessSummary", "PermissionOut"]
