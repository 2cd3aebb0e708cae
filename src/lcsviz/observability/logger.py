"""Structured JSON logging for lcsviz.

Records are written as one JSON object per line so that a host
application can ship them to whatever log pipeline it already uses.

Typical output::

    {"ts": "2026-10-18T09:30:00.000000+00:00", "level": "INFO",
     "logger": "lcsviz.session", "message": "session started",
     "op": "start", "m": 5, "n": 3, "steps": 54}

Usage::

    from lcsviz.observability import get_logger, log_fields

    log = get_logger("lcsviz.session")
    log.info("session started", extra=log_fields(op="start", steps=54))
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Render a :class:`logging.LogRecord` as a single-line JSON object.

    Guaranteed keys are ``ts`` (ISO-8601 UTC), ``level``, ``logger`` and
    ``message``.  Fields passed as ``extra={"extra_fields": {...}}`` are
    merged into the top level; exception and stack information is added
    under ``exception`` and ``stack_info`` when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if fields:
            entry.update(fields)

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)


def log_fields(**fields: Any) -> dict[str, dict[str, Any]]:
    """Build the ``extra`` mapping understood by :class:`StructuredFormatter`."""
    return {"extra_fields": fields}


# Names that already carry a handler; keeps get_logger idempotent.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "lcsviz",
    *,
    level: int | str = logging.DEBUG,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a logger that writes structured JSON.

    Parameters
    ----------
    name:
        Logger name.  Module loggers use ``"lcsviz.<module>"``.
    level:
        Minimum level, as an ``int`` or a case-insensitive level name.
    stream:
        Handler output stream.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The named logger.  Only the first call for a given *name* attaches
        a handler; later calls return the same logger unchanged.
    """
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        resolved = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        logger.setLevel(resolved)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

        _configured_loggers.add(name)

    return logger
