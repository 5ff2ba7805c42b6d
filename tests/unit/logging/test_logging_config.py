"""Unit tests for logging configuration and formatting."""

import json
import logging

from kubewait.config import LoggingConfig
from kubewait.logging import (
    JSONFormatter,
    ResourceContextFilter,
    configure_logging,
    get_resource_context,
    resource_context,
)


def _make_record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="kubewait.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    def test_default_level(self):
        configure_logging(LoggingConfig())
        assert logging.getLogger().level == logging.WARNING

    def test_debug_level(self):
        configure_logging(LoggingConfig(level="debug"))
        assert logging.getLogger().level == logging.DEBUG

    def test_stderr_handler_without_file(self):
        configure_logging(LoggingConfig())
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

    def test_json_format(self):
        configure_logging(LoggingConfig(format="json"))
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, JSONFormatter)

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "nested" / "kubewait.log"
        configure_logging(LoggingConfig(level="info", file=log_file))

        logging.getLogger("kubewait.test").info("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "written to file" in log_file.read_text()

    def test_file_and_stderr(self, tmp_path):
        configure_logging(
            LoggingConfig(file=tmp_path / "kubewait.log", include_stderr=True)
        )
        assert len(logging.getLogger().handlers) == 2


class TestResourceContext:
    def test_context_set_and_restored(self):
        assert get_resource_context() is None
        with resource_context("default/pod/web"):
            assert get_resource_context() == "default/pod/web"
            with resource_context("default/pod/db"):
                assert get_resource_context() == "default/pod/db"
            assert get_resource_context() == "default/pod/web"
        assert get_resource_context() is None

    def test_filter_adds_tag(self):
        record = _make_record()
        with resource_context("pod/web"):
            assert ResourceContextFilter().filter(record) is True
        assert record.resource == "pod/web"
        assert record.resource_tag == "[pod/web] "

    def test_filter_without_context(self):
        record = _make_record()
        ResourceContextFilter().filter(record)
        assert record.resource is None
        assert record.resource_tag == ""


class TestJSONFormatter:
    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(_make_record("hi")))
        assert entry["level"] == "INFO"
        assert entry["message"] == "hi"
        assert entry["logger"] == "kubewait.test"
        assert "context" not in entry

    def test_resource_included(self):
        record = _make_record()
        with resource_context("prod/deployment/api"):
            ResourceContextFilter().filter(record)
        entry = json.loads(JSONFormatter().format(record))
        assert entry["resource"] == "prod/deployment/api"
        assert "resource_tag" not in entry.get("context", {})

    def test_extra_context(self):
        record = _make_record()
        record.condition = "condition=Ready"
        entry = json.loads(JSONFormatter().format(record))
        assert entry["context"] == {"condition": "condition=Ready"}
