"""
JSON log output for the namedays package.

Library modules only call logging.getLogger(__name__). Hosts that want
machine-readable lines call configure_structured_logging(), which attaches
one JSON handler to the "namedays" logger and leaves the root logger alone.
"""
import json
import logging
from datetime import datetime, timezone
from typing import IO, Optional

PACKAGE_LOGGER = "namedays"
HANDLER_NAME = "namedays-json"

# attributes copied from `extra=` into the JSON object
EXTRA_FIELDS = ("year", "movable_id", "holiday_id", "entries", "elapsed_ms")


class StructuredJsonFormatter(logging.Formatter):
    """
    One JSON object per record, e.g.

    {"timestamp": "2026-05-06T09:00:00.123Z", "level": "INFO",
     "logger": "namedays.services.index_cache", "message": "...", "year": 2026}

    The timestamp is the record's creation time in UTC, not the time of formatting.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, getattr(record, key))
            for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info and record.exc_info[0] is not None:
            payload["exception"] = self.formatException(record.exc_info)

        # Cyrillic names stay readable in the output
        return json.dumps(payload, default=str, ensure_ascii=False)


def _resolve_level(log_level: Optional[str]) -> int:
    if log_level is None:
        from namedays.config import get_settings

        log_level = get_settings().log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_structured_logging(
    log_level: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Send namedays log records to `stream` (stderr by default) as JSON lines.

    The level defaults to NAMEDAYS_LOG_LEVEL; unknown names fall back to INFO.
    Calling it again replaces the handler it installed before, so repeated
    calls never duplicate output. Records stop propagating to the root logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            package_logger.removeHandler(handler)
            handler.close()

    handler = logging.StreamHandler(stream)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(StructuredJsonFormatter())

    package_logger.addHandler(handler)
    package_logger.setLevel(_resolve_level(log_level))
    package_logger.propagate = False
    return package_logger
