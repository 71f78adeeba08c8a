from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from glrs_access.core.auth.actor import Actor, UserPermissionOverrides
from glrs_access.core.rbac.types import DataScope, Permission, Role
from glrs_access.features.rbac.service import data_scope, has_permission


def test_from_document_reads_stored_staff_record() -> None:
    actor = Actor.from_document(
        "doc-1",
        {
            "uid": "coach-7",
            "role": "coach",
            "tenantId": "glrs",
            "assignedCoach": None,
            "displayName": "Sam Rivera",
            "email": "sam@example.org",
            "permissions": {"access_resources": True, "access_users": False, "scope": "own_data"},
        },
    )

    assert actor.id == "coach-7"
    assert actor.role is Role.COACH
    assert actor.tenant_id == "glrs"
    assert actor.display_name == "Sam Rivera"
    assert actor.active is True
    assert actor.permissions is not None
    assert actor.permissions.granted(Permission.ACCESS_RESOURCES) is True
    assert actor.permissions.granted(Permission.ACCESS_USERS) is False
    assert actor.permissions.granted(Permission.ACCESS_GOALS) is None
    assert actor.permissions.scope is DataScope.OWN_DATA


def test_from_document_falls_back_to_document_id() -> None:
    actor = Actor.from_document("doc-9", {"role": "pir", "active": False})

    assert actor.id == "doc-9"
    assert actor.active is False
    assert actor.permissions is None


def test_unknown_role_degrades_to_none(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="glrs_access"):
        actor = Actor.from_document("doc-1", {"role": "owner", "tenantId": "glrs"})

    assert actor.role is None
    record = next(r for r in caplog.records if r.getMessage() == "rbac.actor.unknown_role")
    assert record.actor_id == "doc-1"
    assert record.tenant_id == "glrs"


def test_unusable_override_entries_are_dropped(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="glrs_access"):
        actor = Actor.from_document(
            "doc-1",
            {
                "role": "admin",
                "permissions": {
                    "access_users": "true",
                    "access_dashbord": True,
                    "action_export_data": True,
                    "scope": "all_pirs_portal",
                },
            },
        )

    assert actor.permissions is not None
    assert actor.permissions.flags == {Permission.ACTION_EXPORT_DATA: True}
    assert actor.permissions.scope is None
    messages = {record.getMessage() for record in caplog.records}
    assert {
        "rbac.overrides.non_boolean_flag",
        "rbac.overrides.unknown_permission",
        "rbac.overrides.unknown_scope",
    } <= messages


@pytest.mark.parametrize("raw_role", ["SuperAdmin", "SUPERADMIN", " superadmin ", "Admin"])
def test_role_must_match_exactly(raw_role: str, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="glrs_access"):
        actor = Actor.from_document("doc-1", {"role": raw_role, "tenantId": "glrs"})

    assert actor.role is None
    assert has_permission(actor, "access_settings") is False
    assert has_permission(actor, "access_dashboard") is False
    assert data_scope(actor) is DataScope.OWN_DATA
    assert "rbac.actor.unknown_role" in caplog.text


@pytest.mark.parametrize("raw_permissions", [["access_users"], "access_users", True, 0])
def test_non_mapping_permissions_deny_everything(
    raw_permissions: object,
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="glrs_access"):
        actor = Actor.from_document("doc-1", {"role": "coach", "permissions": raw_permissions})

    assert actor.permissions == UserPermissionOverrides()
    assert has_permission(actor, "access_my_pirs") is False
    assert not any(has_permission(actor, permission) for permission in Permission)
    assert "rbac.actor.invalid_permissions" in caplog.text


def test_strict_construction_rejects_malformed_input() -> None:
    with pytest.raises(ValidationError):
        Actor(id="u1", role="owner")

    with pytest.raises(ValidationError):
        UserPermissionOverrides.model_validate({"access_users": "yes"})

    with pytest.raises(ValidationError):
        UserPermissionOverrides.model_validate({"access_everything": True})


def test_overrides_accept_the_flat_stored_shape() -> None:
    overrides = UserPermissionOverrides.model_validate(
        {"access_resources": True, "scope": "assigned_pirs"}
    )

    assert overrides.flags == {Permission.ACCESS_RESOURCES: True}
    assert overrides.scope is DataScope.ASSIGNED_PIRS
    assert overrides.to_document() == {"access_resources": True, "scope": "assigned_pirs"}


def test_actor_snapshot_is_read_only() -> None:
    actor = Actor(id="u1", role=Role.COACH, tenant_id="glrs")

    with pytest.raises(ValidationError):
        actor.role = Role.ADMIN  # type: ignore[misc]


def test_actor_accepts_camel_case_aliases() -> None:
    actor = Actor.model_validate(
        {"uid": "u2", "role": "admin", "tenantId": "glrs", "assignedCoach": "c1"}
    )

    assert actor.id == "u2"
    assert actor.tenant_id == "glrs"
    assert actor.assigned_coach == "c1"
