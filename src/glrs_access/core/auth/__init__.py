"""Identity models and auth/permission errors."""

from ..errors import (
    AccessError,
    AuthenticationError,
    PermissionDeniedError,
    UnknownPermissionError,
)
from .actor import Actor, UserPermissionOverrides

__all__ = [
    "AccessError",
    "Actor",
    "AuthenticationError",
    "PermissionDeniedError",
    "UnknownPermissionError",
    "UserPermissionOverrides",
]
