"""Static RBAC policy: which roles bypass presets and overrides."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .types import DataScope, Role

# Bypass roles and the scope each one resolves to.
BYPASS_SCOPES: Mapping[Role, DataScope] = MappingProxyType(
    {
        Role.SUPERADMIN: DataScope.ALL_TENANTS,
        Role.SUPERADMIN1: DataScope.ALL_PIRS_TENANT,
    }
)


@dataclass(frozen=True)
class BypassPolicy:
    """Single source of truth for the unconditional grant.

    Both resolvers consult this first, so permission and scope bypass can
    never disagree about which roles it covers.
    """

    scopes: Mapping[Role, DataScope] = field(default_factory=lambda: dict(BYPASS_SCOPES))

    def __post_init__(self) -> None:
        object.__setattr__(self, "scopes", MappingProxyType(dict(self.scopes)))

    @property
    def roles(self) -> frozenset[Role]:
        return frozenset(self.scopes)

    def applies(self, role: Role | None) -> bool:
        return role is not None and role in self.scopes

    def scope_for(self, role: Role | None) -> DataScope | None:
        if role is None:
            return None
        return self.scopes.get(role)


DEFAULT_BYPASS = BypassPolicy()

__all__ = ["BYPASS_SCOPES", "BypassPolicy", "DEFAULT_BYPASS"]
