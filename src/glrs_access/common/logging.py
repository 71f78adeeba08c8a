"""Logging configuration and helpers for the access engine.

Two output formats are supported:

* human-readable console lines, and
* one JSON object per line for log ingestion.

Callers bind the acting user's id with :func:`bind_actor_context` so every
record emitted while handling that actor carries it, and build structured
``extra`` payloads with :func:`log_context`.

Everything uses the standard :mod:`logging` library.
"""

from __future__ import annotations

import json
import logging
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

from glrs_access.settings import Settings

# ---------------------------------------------------------------------------
# Context and constants
# ---------------------------------------------------------------------------

_ACTOR_ID: ContextVar[str | None] = ContextVar("glrs_access_actor_id", default=None)

# Attributes already handled by logging that must not be copied as extras.
_STANDARD_ATTRS: set[str] = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "message",
    "asctime",
    "actor_id",
    "taskName",
    "color_message",
}

_CONFIGURED_FLAG = "_glrs_configured"
_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


def _format_time(record: logging.LogRecord, datefmt: str | None) -> str:
    dt = datetime.fromtimestamp(record.created, tz=UTC)
    base = dt.strftime(datefmt or _TIME_FORMAT)
    return f"{base}.{int(record.msecs):03d}Z"


class ConsoleLogFormatter(logging.Formatter):
    """Render log records as single-line console output.

    Example line:

        2026-10-19T09:12:00.302Z WARNING glrs_access.core.auth.actor [actor=u_1]
        rbac.actor.unknown_role tenant_id=glrs value=owner
    """

    def __init__(self) -> None:
        fmt = "%(asctime)s %(levelname)-5s %(name)s [actor=%(actor_id)s] %(message)s"
        super().__init__(fmt=fmt, datefmt=_TIME_FORMAT)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return _format_time(record, datefmt)

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - std signature
        record.actor_id = getattr(record, "actor_id", None) or _ACTOR_ID.get() or "-"
        base = super().format(record)
        extras = [
            f"{key}={_format_extra_value(value)}"
            for key, value in sorted(_record_extras(record).items())
        ]
        if extras:
            return f"{base} " + " ".join(extras)
        return base


class JsonLogFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return _format_time(record, datefmt)

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - std signature
        actor_id = getattr(record, "actor_id", None) or _ACTOR_ID.get() or "-"
        record.actor_id = actor_id
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, _TIME_FORMAT),
            "level": record.levelname,
            "service": "glrs-access",
            "logger": record.name,
            "message": record.getMessage(),
            "actor_id": actor_id,
        }
        payload.update(_record_extras(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


def setup_logging(settings: Settings) -> None:
    """Configure root logging for the process.

    Installs a single StreamHandler formatted per ``settings.log_format`` and
    sets the root level from ``settings.log_level``. Calling it again only
    swaps the formatter and level.
    """
    root_logger = logging.getLogger()

    configured = getattr(root_logger, _CONFIGURED_FLAG, False)
    if not configured or not root_logger.handlers:
        root_logger.handlers = [logging.StreamHandler()]
        setattr(root_logger, _CONFIGURED_FLAG, True)
    else:
        root_logger.handlers = [root_logger.handlers[0]]

    handler = root_logger.handlers[0]
    handler.setFormatter(_build_formatter(settings.log_format))
    root_logger.setLevel(getattr(logging, settings.log_level))

    engine_logger = logging.getLogger("glrs_access")
    engine_logger.handlers.clear()
    engine_logger.propagate = True
    engine_logger.setLevel(logging.NOTSET)


# ---------------------------------------------------------------------------
# Context helpers
# ---------------------------------------------------------------------------


def bind_actor_context(actor_id: str | None) -> None:
    """Bind the acting user's id to the logging context."""
    _ACTOR_ID.set(actor_id)


def clear_actor_context() -> None:
    _ACTOR_ID.set(None)


def current_actor_id() -> str | None:
    return _ACTOR_ID.get()


def log_context(
    *,
    actor_id: str | None = None,
    tenant_id: str | None = None,
    role: str | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build a consistent ``extra`` payload for structured logs.

    Example:
        logger.warning(
            "rbac.actor.unknown_role",
            extra=log_context(actor_id=doc_id, tenant_id=tenant, value=raw_role),
        )
    """
    ctx: dict[str, Any] = {}

    if actor_id is not None:
        ctx["actor_id"] = str(actor_id)
    if tenant_id is not None:
        ctx["tenant_id"] = str(tenant_id)
    if role is not None:
        ctx["role"] = str(role)

    for key, value in extra.items():
        ctx[key] = value

    return ctx


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _format_extra_value(value: Any) -> str:
    if value is None:
        return "null"
    return str(value)


def _record_extras(record: logging.LogRecord) -> dict[str, Any]:
    extras: dict[str, Any] = {}
    for key, value in record.__dict__.items():
        if key in _STANDARD_ATTRS or key.startswith("_"):
            continue
        extras[key] = value
    return extras


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JsonLogFormatter()
    return ConsoleLogFormatter()


__all__ = [
    "ConsoleLogFormatter",
    "JsonLogFormatter",
    "bind_actor_context",
    "clear_actor_context",
    "current_actor_id",
    "log_context",
    "setup_logging",
]
