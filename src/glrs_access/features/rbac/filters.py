"""Translate a resolved data scope into row filters.

``all_tenants`` adds no tenant filter, ``all_pirs_tenant`` filters by tenant,
``assigned_pirs`` adds "assigned coach is the actor" and ``own_data`` adds
"owner is the actor". Clauses are built here and executed by the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import and_, false, true
from sqlalchemy.sql import Select
from sqlalchemy.sql.elements import ColumnElement

from glrs_access.core.auth.actor import Actor
from glrs_access.core.rbac.types import DataScope

from .service import AccessService, get_default_service


@dataclass(frozen=True)
class ScopeColumns:
    """Columns of the target selectable that scope filters compare against."""

    tenant: ColumnElement[Any]
    assigned_coach: ColumnElement[Any] | None = None
    owner: ColumnElement[Any] | None = None


def scope_predicate(
    actor: Actor | None,
    tenant_id: str | None,
    columns: ScopeColumns,
    *,
    scope: DataScope | None = None,
    service: AccessService | None = None,
) -> ColumnElement[bool]:
    """Return a boolean clause limiting rows to what ``actor`` may see.

    ``scope`` overrides the resolved scope (e.g. a screen that deliberately
    narrows). Anything that cannot be expressed with the given columns
    matches nothing.
    """

    if actor is None:
        return false()

    resolved = scope or (service or get_default_service()).data_scope(actor)
    if resolved is DataScope.ALL_TENANTS:
        return true()
    if tenant_id is None:
        return false()

    tenant_clause = columns.tenant == tenant_id
    if resolved is DataScope.ALL_PIRS_TENANT:
        return tenant_clause

    if resolved is DataScope.ASSIGNED_PIRS:
        if columns.assigned_coach is None:
            return false()
        return and_(tenant_clause, columns.assigned_coach == actor.id)

    if columns.owner is None:
        return false()
    return and_(tenant_clause, columns.owner == actor.id)


def apply_scope(
    stmt: Select[Any],
    actor: Actor | None,
    tenant_id: str | None,
    columns: ScopeColumns,
    *,
    scope: DataScope | None = None,
    service: AccessService | None = None,
) -> Select[Any]:
    """Attach :func:`scope_predicate` to ``stmt``."""

    return stmt.where(
        scope_predicate(actor, tenant_id, columns, scope=scope, service=service)
    )


def is_in_scope(
    actor: Actor | None,
    record: Mapping[str, Any],
    tenant_id: str | None,
    *,
    service: AccessService | None = None,
) -> bool:
    """Check an already-fetched record against the actor's scope.

    ``record`` uses the stored document keys: ``tenantId``, ``assignedCoach``,
    ``userId`` and ``uid``.
    """

    if actor is None:
        return False

    resolved = (service or get_default_service()).data_scope(actor)
    if resolved is DataScope.ALL_TENANTS:
        return True

    # Same tenant clause as scope_predicate: records without a tenant never match.
    if tenant_id is None or record.get("tenantId") != tenant_id:
        return False

    if resolved is DataScope.ALL_PIRS_TENANT:
        return True
    if resolved is DataScope.ASSIGNED_PIRS:
        return actor.id in (record.get("assignedCoach"), record.get("userId"))
    return actor.id in (record.get("userId"), record.get("uid"))


__all__ = [
    "ScopeColumns",
    "apply_scope",
    "is_in_scope",
    "scope_predicate",
]
