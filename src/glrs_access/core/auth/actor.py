"""Identity snapshot consumed by the access engine.

Actors are produced by the identity/session layer (usually straight from the
user/staff document) and are read-only here: the engine never mutates or
caches them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, ConfigDict, Field, StrictBool, model_validator

from glrs_access.common.logging import log_context
from glrs_access.common.schema import BaseSchema
from glrs_access.core.rbac.types import DataScope, Permission, Role

logger = logging.getLogger(__name__)

_SCOPE_KEY = "scope"


class UserPermissionOverrides(BaseSchema):
    """Sparse per-user deviations from the role preset.

    Stored flat on the user record, e.g.
    ``{"access_resources": true, "scope": "assigned_pirs"}``. A key that is
    absent is different from ``False`` only when partial merging is enabled.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    flags: dict[Permission, StrictBool] = Field(default_factory=dict)
    scope: DataScope | None = None

    @model_validator(mode="before")
    @classmethod
    def _split_flat_document(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and "flags" not in data:
            return {
                "flags": {key: value for key, value in data.items() if key != _SCOPE_KEY},
                "scope": data.get(_SCOPE_KEY),
            }
        return data

    @classmethod
    def from_document(
        cls,
        data: Mapping[str, Any],
        *,
        actor_id: str | None = None,
    ) -> UserPermissionOverrides:
        """Leniently parse stored overrides, dropping entries that cannot apply."""

        flags: dict[Permission, bool] = {}
        for key, value in data.items():
            if key == _SCOPE_KEY:
                continue
            permission = Permission.coerce(key)
            if permission is None:
                logger.warning(
                    "rbac.overrides.unknown_permission",
                    extra=log_context(actor_id=actor_id, permission=key),
                )
                continue
            if not isinstance(value, bool):
                logger.warning(
                    "rbac.overrides.non_boolean_flag",
                    extra=log_context(actor_id=actor_id, permission=key, value=repr(value)),
                )
                continue
            flags[permission] = value

        raw_scope = data.get(_SCOPE_KEY)
        scope = DataScope.coerce(raw_scope)
        if raw_scope is not None and scope is None:
            logger.warning(
                "rbac.overrides.unknown_scope",
                extra=log_context(actor_id=actor_id, value=repr(raw_scope)),
            )
        return cls(flags=flags, scope=scope)

    def granted(self, permission: Permission) -> bool | None:
        """Explicit value for ``permission``, or ``None`` when not listed."""

        return self.flags.get(permission)

    def to_document(self) -> dict[str, Any]:
        document: dict[str, Any] = {
            permission.value: allowed for permission, allowed in self.flags.items()
        }
        if self.scope is not None:
            document[_SCOPE_KEY] = self.scope.value
        return document


class Actor(BaseSchema):
    """Authenticated staff or PIR identity as seen by the engine."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(validation_alias=AliasChoices("id", "uid"))
    role: Role | None = None
    tenant_id: str | None = Field(default=None, alias="tenantId")
    permissions: UserPermissionOverrides | None = None
    assigned_coach: str | None = Field(default=None, alias="assignedCoach")
    email: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")
    active: bool = True

    @classmethod
    def from_document(cls, doc_id: str, data: Mapping[str, Any]) -> Actor:
        """Build an actor from a raw user document.

        Malformed fields degrade to their least-privileged reading instead of
        failing: an unknown role becomes ``None`` and unusable permission
        entries are dropped.
        """

        actor_id = str(data.get("uid") or doc_id)
        tenant_id = _optional_str(data.get("tenantId"))

        raw_role = data.get("role")
        role = Role.coerce(raw_role)
        if raw_role is not None and role is None:
            logger.warning(
                "rbac.actor.unknown_role",
                extra=log_context(actor_id=actor_id, tenant_id=tenant_id, value=repr(raw_role)),
            )

        raw_permissions = data.get("permissions")
        permissions: UserPermissionOverrides | None = None
        if isinstance(raw_permissions, Mapping):
            permissions = UserPermissionOverrides.from_document(
                raw_permissions,
                actor_id=actor_id,
            )
        elif raw_permissions is not None:
            # Present but unreadable: deny everything rather than fall back to the preset.
            permissions = UserPermissionOverrides()
            logger.warning(
                "rbac.actor.invalid_permissions",
                extra=log_context(
                    actor_id=actor_id,
                    tenant_id=tenant_id,
                    value_type=type(raw_permissions).__name__,
                ),
            )

        return cls(
            id=actor_id,
            role=role,
            tenant_id=tenant_id,
            permissions=permissions,
            assigned_coach=_optional_str(data.get("assignedCoach")),
            email=_optional_str(data.get("email")),
            display_name=_optional_str(data.get("displayName")),
            active=data.get("active") is not False,
        )


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    candidate = str(value).strip()
    return candidate or None


__all__ = ["Actor", "UserPermissionOverrides"]
