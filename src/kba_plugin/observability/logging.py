"""
kba_plugin.observability.logging

Structured logging configuration shared by the kernel and the CI tooling.

Responsibilities:
- Configure `structlog` for JSON log lines on top of stdlib logging.
- Route CLI logs to stderr so stdout stays a pure data channel.
- Provide a small wrapper for obtaining bound loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog


def configure_logging(
    *,
    service_name: str,
    level: str,
    stream: TextIO | None = None,
    replace_handlers: bool = False,
) -> None:
    """
    Install a JSON stream handler on the root logger and configure structlog.

    The kernel runs inside a host process (or the test runner), so existing root
    handlers are left alone unless `replace_handlers` is set. Entrypoints that own
    the process, like `kba-ci-matrix`, pass `replace_handlers=True` together with
    `stream=sys.stderr`.
    """

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if replace_handlers or not root.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        for existing in list(root.handlers):
            root.removeHandler(existing)
        root.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(service_name),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_service_name(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Log events are dotted names (`kernel.boot`, `migration.applied`, `ci.root_fallback`)
# with context passed as keyword fields; keep them stable for log queries.
