"""
classroom_api.observability.logging

Structured logging configuration for the service.

Responsibilities:
- Configure `structlog` to render one JSON object per line on stdout.
- Shape each line for Cloud Logging: `severity`, `message` and `timestamp` are the
  keys its agent lifts into the LogEntry; everything else lands in `jsonPayload`.
- Stamp every line with the service name and deployment env.
- Provide a small wrapper for obtaining bound loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_SEVERITIES = frozenset(
    {"DEFAULT", "DEBUG", "INFO", "NOTICE", "WARNING", "ERROR", "CRITICAL", "ALERT", "EMERGENCY"}
)
_SEVERITY_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL", "EXCEPTION": "ERROR"}


def configure_logging(*, service_name: str, env: str, level: str) -> None:
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            _add_service(service_name, env),
            _add_severity,
            structlog.processors.EventRenamer("message"),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def normalize_severity(level: str | int | None) -> str:
    """
    Map a Python/structlog level onto a Cloud Logging `LogSeverity` name.

    Unknown values fall back to INFO rather than being dropped.
    """
    if isinstance(level, int):
        return normalize_severity(logging.getLevelName(level))
    name = str(level or "INFO").strip().upper()
    if name in _SEVERITIES:
        return name
    return _SEVERITY_ALIASES.get(name, "INFO")


def _add_service(service_name: str, env: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        event_dict.setdefault("env", env)
        return event_dict

    return processor


def _add_severity(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict["severity"] = normalize_severity(event_dict.pop("level", None))
    return event_dict


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Request-scoped metadata (request_id, path, method, uid) is bound via contextvars
# by the request middleware and the auth guard, and merged into every line here.
