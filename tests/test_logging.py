"""
Structured JSON logging tests.
"""
import io
import json
import logging
import sys

import pytest

from namedays.services.index_cache import get_index
from namedays.utils.logging import (
    HANDLER_NAME,
    StructuredJsonFormatter,
    configure_structured_logging,
)


def _record(msg="Built index", level=logging.INFO, **extra):
    record = logging.LogRecord(
        name="namedays.services.index_cache",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def package_logger():
    """The namedays logger, restored to its previous handlers/level/propagation afterwards."""
    logger = logging.getLogger("namedays")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield logger
    for handler in logger.handlers:
        if handler not in saved[0]:
            handler.close()
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


class TestStructuredJsonFormatter:
    def test_basic_fields(self):
        data = json.loads(StructuredJsonFormatter().format(_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "namedays.services.index_cache"
        assert data["message"] == "Built index"
        assert data["timestamp"].endswith("Z")

    def test_timestamp_is_record_creation_time(self):
        record = _record()
        record.created = 1778058000.25  # 2026-05-06T09:00:00.250Z
        data = json.loads(StructuredJsonFormatter().format(record))
        assert data["timestamp"] == "2026-05-06T09:00:00.250Z"

    def test_extras_included(self):
        data = json.loads(StructuredJsonFormatter().format(_record(year=2026, entries=120, elapsed_ms=3)))
        assert data["year"] == 2026
        assert data["entries"] == 120
        assert data["elapsed_ms"] == 3

    def test_unknown_extras_ignored(self):
        data = json.loads(StructuredJsonFormatter().format(_record(secret="x")))
        assert "secret" not in data

    def test_cyrillic_kept_readable(self):
        line = StructuredJsonFormatter().format(_record(msg="Цветница"))
        assert "Цветница" in line

    def test_exception_included(self):
        try:
            raise LookupError("missing")
        except LookupError:
            record = _record(level=logging.ERROR)
            record.exc_info = sys.exc_info()
        data = json.loads(StructuredJsonFormatter().format(record))
        assert "LookupError" in data["exception"]


class TestConfigureStructuredLogging:
    def test_repeated_calls_keep_one_handler(self, package_logger):
        configure_structured_logging("DEBUG")
        configure_structured_logging("WARNING")
        ours = [h for h in package_logger.handlers if h.get_name() == HANDLER_NAME]
        assert len(ours) == 1
        assert package_logger.level == logging.WARNING

    def test_root_logger_untouched(self, package_logger):
        root = logging.getLogger()
        before = root.handlers[:], root.level
        configure_structured_logging("DEBUG")
        assert (root.handlers[:], root.level) == before
        assert package_logger.propagate is False

    def test_unknown_level_defaults_to_info(self, package_logger):
        configure_structured_logging("chatty")
        assert package_logger.level == logging.INFO

    def test_level_from_settings(self, package_logger, set_env):
        set_env(log_level="error")
        configure_structured_logging()
        assert package_logger.level == logging.ERROR

    def test_library_records_written_as_json(self, package_logger):
        stream = io.StringIO()
        configure_structured_logging("INFO", stream=stream)
        get_index(2026)

        lines = [json.loads(line) for line in stream.getvalue().splitlines()]
        built = [line for line in lines if line["logger"] == "namedays.services.index_cache"]
        assert built
        assert built[0]["year"] == 2026
        assert "elapsed_ms" in built[0]
