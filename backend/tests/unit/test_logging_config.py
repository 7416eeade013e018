"""
Tests for structured JSON logging.
"""

import json
import logging
import sys

from gspro.core.logging_config import JSONFormatter, get_logger, setup_logging


def make_record(msg="Sale finalized", **extra):
    record = logging.LogRecord(
        name="gspro.services.checkout",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:

    def test_basic_fields(self):
        output = json.loads(JSONFormatter().format(make_record()))

        assert output["level"] == "INFO"
        assert output["message"] == "Sale finalized"
        assert output["logger"] == "gspro.services.checkout"
        assert "timestamp" in output

    def test_extra_fields_are_included(self):
        record = make_record(sale_id="abc", total=4200.0, request_id="req-1")

        output = json.loads(JSONFormatter().format(record))

        assert output["sale_id"] == "abc"
        assert output["total"] == 4200.0
        assert output["request_id"] == "req-1"

    def test_none_extras_are_skipped(self):
        output = json.loads(JSONFormatter().format(make_record(client_id=None)))

        assert "client_id" not in output

    def test_non_ascii_is_kept(self):
        output = JSONFormatter().format(make_record("Estoque insuficiente para Alumínio"))

        assert "Alumínio" in output

    def test_exception_is_formatted(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = make_record("Request failed")
            record.exc_info = sys.exc_info()

        output = json.loads(JSONFormatter().format(record))

        assert "RuntimeError: boom" in output["exception"]


class TestSetupLogging:

    def test_single_json_handler(self):
        setup_logging(level="DEBUG", json_format=True)
        setup_logging(level="WARNING", json_format=True)

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert root.level == logging.WARNING

    def test_get_logger(self):
        assert get_logger("gspro.test").name == "gspro.test"
