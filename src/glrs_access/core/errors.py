"""Shared access-control error types."""


class AccessError(Exception):
    """Base class for errors raised around the access engine."""


class UnknownPermissionError(AccessError, ValueError):
    """Raised when a permission key is not in the catalogue."""

    def __init__(self, permission_key: str) -> None:
        self.permission_key = permission_key
        super().__init__(f"Permission '{permission_key}' is not registered")


class AuthenticationError(AccessError):
    """Raised when a request has no actor bound to it."""


class PermissionDeniedError(AccessError):
    """Raised when an actor lacks a required permission."""

    def __init__(
        self,
        permission_key: str,
        *,
        role: str | None = None,
        tenant_id: str | None = None,
    ) -> None:
        self.permission_key = permission_key
        self.role = role
        self.tenant_id = tenant_id
        msg = f"Permission '{permission_key}' denied"
        if role:
            msg = f"{msg} for role '{role}'"
        super().__init__(msg)
