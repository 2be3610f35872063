"""
Logging for seed and probe runs.

Every record emitted while a run is active carries that run's short id, so
the lines of one seed run can be picked out of a shared log. Development
output is one readable line per record; production output is one JSON object
per line with any `extra=` fields merged in.

Usage:
    from content_seeder.logging_config import get_logger
    logger = get_logger(__name__)
    logger.info("Created section", extra={"section_id": section_id})
"""

import json
import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Optional

run_id_var: ContextVar[Optional[str]] = ContextVar("run_id", default=None)

# Attributes every LogRecord has; anything else on a record came from extra=
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "run_id"}

# HTTP stack loggers that repeat what the client already logs per request
_QUIET_LOGGERS = ("httpx", "httpcore")


def get_run_id() -> Optional[str]:
    """Get the current run ID from context, if set."""
    return run_id_var.get()


def new_run_id() -> str:
    """Start a new run: generate a short run ID and bind it to the context."""
    run_id = uuid.uuid4().hex[:8]
    run_id_var.set(run_id)
    return run_id


class RunIdFilter(logging.Filter):
    """Stamp the active run ID (or '-') on each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = get_run_id() or "-"  # type: ignore[attr-defined]
        return True


def _jsonable(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value


class JsonFormatter(logging.Formatter):
    """One JSON object per record: level, logger, message, run_id and extras."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        run_id = getattr(record, "run_id", "-")
        if run_id != "-":
            entry["run_id"] = run_id
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        entry.update(
            (key, _jsonable(value))
            for key, value in vars(record).items()
            if key not in _STANDARD_ATTRS and value is not None
        )
        return json.dumps(entry)


def _build_handler(environment: str, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(RunIdFilter())
    if environment == "production":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-5s [%(name)s] run=%(run_id)s %(message)s",
                datefmt="%H:%M:%S",
            )
        )
    return handler


def configure_logging(
    *,
    log_level: str = "INFO",
    environment: str = "development",
    debug: bool = False,
) -> None:
    """
    Replace the root handlers with a single stderr handler.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        environment: 'production' switches to JSON lines
        debug: If True, use DEBUG level regardless of log_level
    """
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.addHandler(_build_handler(environment, level))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger; records pick up the run ID from the root handler."""
    return logging.getLogger(name)
