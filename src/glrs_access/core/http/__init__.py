"""HTTP adapters: FastAPI guard dependencies and error handlers."""

from .dependencies import (
    ActorDep,
    ServiceDep,
    get_access_service,
    get_current_actor,
    get_data_scope,
    require_action,
    require_page,
    require_permission,
)
from .errors import register_access_exception_handlers

__all__ = [
    "ActorDep",
    "ServiceDep",
    "get_access_service",
    "get_current_actor",
    "get_data_scope",
    "register_access_exception_handlers",
    "require_action",
    "require_page",
    "require_permission",
]
