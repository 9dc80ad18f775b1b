"""Structured JSON logger for the résumé parser.

Outputs one JSON object per record:
{"time":"2026-02-03T14:06:20.829529-05:00","level":"INFO","source":{"function":"read_pdf","file":"pdf_reader.py","line":43},"msg":"pdf read","total_pages":1}
"""

import json
import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Iterator

LOG_LEVEL_ENV = "RESUME_PARSER_LOG_LEVEL"

# Fields attached to every record emitted inside a log_context() block
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


class StructuredFormatter(logging.Formatter):
    """JSON formatter with source location, context and per-call fields."""

    def format(self, record: logging.LogRecord) -> str:
        now = datetime.now(timezone.utc).astimezone()

        log_entry: dict[str, Any] = {
            "time": now.isoformat(),
            "level": record.levelname,
            "source": {
                "function": record.funcName,
                "file": record.pathname,
                "line": record.lineno,
            },
            "msg": record.getMessage(),
        }

        ctx_fields = _log_context.get()
        if ctx_fields:
            log_entry.update(ctx_fields)

        if hasattr(record, "extra_fields"):
            log_entry.update(record.extra_fields)

        return json.dumps(log_entry, default=str)


def _resolve_level(name: str | None) -> int:
    level = logging.getLevelName((name or "INFO").upper())
    if not isinstance(level, int):
        raise ValueError(f"invalid log level for {LOG_LEVEL_ENV}: {name!r}")
    return level


class StructuredLogger:
    """Logger that writes structured JSON lines to stdout."""

    def __init__(self, name: str = "resume_parser", level: str | None = None):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(_resolve_level(level or os.getenv(LOG_LEVEL_ENV)))

        self._logger.handlers.clear()

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        self._logger.addHandler(handler)

        self._logger.propagate = False

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _log(
        self,
        level: int,
        msg: str,
        stacklevel: int = 3,
        **fields: Any,
    ) -> None:
        extra = {"extra_fields": fields} if fields else {}
        self._logger.log(level, msg, stacklevel=stacklevel, extra=extra)

    def debug(self, msg: str, **fields: Any) -> None:
        """Log a debug message with optional fields."""
        self._log(logging.DEBUG, msg, **fields)

    def info(self, msg: str, **fields: Any) -> None:
        """Log an info message with optional fields."""
        self._log(logging.INFO, msg, **fields)

    def warn(self, msg: str, **fields: Any) -> None:
        """Log a warning message with optional fields."""
        self._log(logging.WARNING, msg, **fields)

    def error(self, msg: str, **fields: Any) -> None:
        """Log an error message with optional fields."""
        self._log(logging.ERROR, msg, **fields)


@contextmanager
def log_context(**fields: Any) -> Iterator[None]:
    """Attach fields to every record logged inside the block.

    The previous context is restored on exit, so nested blocks and
    concurrent parses in separate threads or tasks do not leak fields.

    Example:
        with log_context(resume_sha256="3f2a9c"):
            logger.info("resume parsed")  # includes resume_sha256
    """
    token = _log_context.set({**_log_context.get(), **fields})
    try:
        yield
    finally:
        _log_context.reset(token)


def get_context() -> dict[str, Any]:
    """Get current context fields."""
    return _log_context.get().copy()


logger = StructuredLogger("resume_parser")
