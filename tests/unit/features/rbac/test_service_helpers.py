from __future__ import annotations

import logging

import pytest

from glrs_access.core.rbac.presets import COACH_PRESET, default_permissions
from glrs_access.core.rbac.registry import PAGES, PERMISSIONS
from glrs_access.core.rbac.types import DataScope, Permission, Role
from glrs_access.features.rbac.schemas import AccessSummary
from glrs_access.features.rbac.service import (
    AccessService,
    build_access_service,
    can_access_tenant,
    can_edit_permissions,
    describe_access,
    effective_permissions,
    ensure_permissions,
    is_super_admin,
    is_super_admin1,
    permission_catalog,
    role_at_least,
    visible_pages,
)
from glrs_access.settings import Settings


def test_ensure_permissions_materializes_the_role_preset(make_actor, caplog) -> None:
    coach = make_actor(Role.COACH, actor_id="coach-1")

    with caplog.at_level(logging.WARNING, logger="glrs_access"):
        ensured = ensure_permissions(coach)

    assert ensured is not coach
    assert coach.permissions is None
    assert ensured.permissions is not None
    assert ensured.permissions.scope is DataScope.ASSIGNED_PIRS
    assert ensured.permissions.flags == dict(COACH_PRESET.flags)

    record = next(r for r in caplog.records if r.getMessage() == "rbac.actor.preset_applied")
    assert record.actor_id == "coach-1"
    assert record.role == "coach"


def test_ensure_permissions_keeps_existing_overrides(make_actor, caplog) -> None:
    coach = make_actor(Role.COACH, permissions={"access_users": True})

    with caplog.at_level(logging.WARNING, logger="glrs_access"):
        assert ensure_permissions(coach) is coach

    assert not caplog.records
    assert ensure_permissions(None) is None


def test_ensured_actor_resolves_like_the_unensured_one(make_actor) -> None:
    admin = make_actor(Role.ADMIN)
    ensured = ensure_permissions(admin)

    assert effective_permissions(ensured) == effective_permissions(admin)


def test_can_edit_permissions_is_limited_to_bypass_roles(make_actor) -> None:
    assert can_edit_permissions(make_actor(Role.SUPERADMIN)) is True
    assert can_edit_permissions(make_actor(Role.SUPERADMIN1)) is True
    assert can_edit_permissions(make_actor(Role.ADMIN)) is False
    assert can_edit_permissions(None) is False


def test_super_admin_checks(make_actor) -> None:
    assert is_super_admin(make_actor(Role.SUPERADMIN)) is True
    assert is_super_admin(make_actor(Role.SUPERADMIN1)) is False
    assert is_super_admin1(make_actor(Role.SUPERADMIN1)) is True
    assert is_super_admin1(None) is False


@pytest.mark.parametrize(
    ("role", "tenant_id", "expected"),
    [
        (Role.SUPERADMIN, "other", True),
        (Role.SUPERADMIN, None, True),
        (Role.SUPERADMIN1, "glrs", True),
        (Role.SUPERADMIN1, "other", False),
        (Role.COACH, "glrs", True),
        (Role.COACH, "other", False),
        (Role.ADMIN, None, False),
    ],
)
def test_can_access_tenant(make_actor, role: Role, tenant_id: str | None, expected: bool) -> None:
    assert can_access_tenant(make_actor(role), tenant_id) is expected


def test_can_access_tenant_without_actor() -> None:
    assert can_access_tenant(None, "glrs") is False


def test_role_at_least(make_actor) -> None:
    assert role_at_least(make_actor(Role.ADMIN), Role.COACH) is True
    assert role_at_least(make_actor(Role.ADMIN), Role.ADMIN) is True
    assert role_at_least(make_actor(Role.COACH), Role.ADMIN) is False
    assert role_at_least(make_actor(None), Role.PIR) is False
    assert role_at_least(None, Role.PIR) is False


def test_effective_permissions_match_the_preset(make_actor) -> None:
    assert effective_permissions(make_actor(Role.ADMIN)) == default_permissions(Role.ADMIN).granted
    assert effective_permissions(make_actor(Role.SUPERADMIN)) == frozenset(Permission)
    assert effective_permissions(None) == frozenset()


def test_visible_pages_keep_catalogue_order(make_actor) -> None:
    pages = visible_pages(make_actor(Role.COACH))

    assert pages[0] == "dashboard"
    assert "users" not in pages
    assert list(pages) == [page for page in PAGES if page in pages]
    assert visible_pages(make_actor(Role.SUPERADMIN)) == PAGES


def test_describe_access(make_actor) -> None:
    summary = describe_access(make_actor(Role.ADMIN, actor_id="admin-1"))

    assert isinstance(summary, AccessSummary)
    assert summary.actor_id == "admin-1"
    assert summary.role is Role.ADMIN
    assert summary.rank == 3
    assert summary.scope is DataScope.ALL_PIRS_TENANT
    assert summary.can_edit_permissions is False
    assert summary.permissions["access_users"] is True
    assert summary.permissions["access_settings"] is False
    assert len(summary.permissions) == len(Permission)

    payload = summary.serializable_dict()
    assert payload["role"] == "admin"
    assert payload["scope"] == "all_pirs_tenant"


def test_describe_access_without_actor() -> None:
    summary = describe_access(None)

    assert summary.actor_id is None
    assert summary.rank is None
    assert summary.scope is DataScope.OWN_DATA
    assert summary.pages == []
    assert not any(summary.permissions.values())


def test_permission_catalog_lists_every_definition() -> None:
    catalog = permission_catalog()

    assert [entry.key for entry in catalog] == [definition.key for definition in PERMISSIONS]
    users = next(entry for entry in catalog if entry.key == "access_users")
    assert users.kind == "access"
    assert users.name == "users"
    assert users.label


def test_build_access_service_reads_merge_flag(make_actor) -> None:
    coach = make_actor(Role.COACH, permissions={"access_resources": True})

    strict = build_access_service(Settings(_env_file=None))
    merging = build_access_service(Settings(_env_file=None, merge_partial_overrides=True))

    assert isinstance(strict, AccessService)
    assert strict.has_permission(coach, "access_my_pirs") is False
    assert merging.has_permission(coach, "access_my_pirs") is True
