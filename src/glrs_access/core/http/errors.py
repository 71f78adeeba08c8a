"""Exception handlers that translate access errors to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from glrs_access.core.errors import AuthenticationError, PermissionDeniedError


def _handle_authentication_error(_request: Request, exc: AuthenticationError) -> JSONResponse:
    """Translate a missing actor into HTTP 401."""

    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc) or "Authentication required"},
    )


def _handle_permission_error(_request: Request, exc: PermissionDeniedError) -> JSONResponse:
    """Translate permission denials into HTTP 403."""

    detail = {
        "error": "forbidden",
        "permission": exc.permission_key,
        "role": exc.role,
        "tenant_id": exc.tenant_id,
    }
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"detail": detail},
    )


def register_access_exception_handlers(app: FastAPI) -> None:
    """Attach access-control handlers to the FastAPI app."""

    app.add_exception_handler(AuthenticationError, _handle_authentication_error)
    app.add_exception_handler(PermissionDeniedError, _handle_permission_error)


__all__ = ["register_access_exception_handlers"]
