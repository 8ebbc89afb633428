"""Tests for the log formatters."""

import json
import logging
import sys

from bookshelf.logging import (
    ExcludePathsFilter,
    HumanReadableFormatter,
    StructuredJSONFormatter,
)
from bookshelf.middlewares.correlation_id import correlation_id


def make_record(level=logging.INFO, msg="hello", **extra):
    record = logging.LogRecord(
        name="bookshelf",
        level=level,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
        func="handler",
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredJSONFormatter:
    """Tests for the JSON formatter used for the error log file."""

    def test_standard_fields(self):
        payload = json.loads(StructuredJSONFormatter().format(make_record()))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "bookshelf"
        assert payload["message"] == "hello"
        assert payload["function"] == "handler"
        assert payload["line"] == 10
        assert "request_id" not in payload

    def test_extra_fields_are_included(self):
        record = make_record(exception_type="NotFoundError")

        payload = json.loads(StructuredJSONFormatter().format(record))

        assert payload["exception_type"] == "NotFoundError"

    def test_correlation_id_is_included(self):
        token = correlation_id.set("abcd1234")
        try:
            payload = json.loads(
                StructuredJSONFormatter().format(make_record())
            )
        finally:
            correlation_id.reset(token)

        assert payload["request_id"] == "abcd1234"

    def test_exception_is_formatted(self):
        try:
            raise ValueError("broken")
        except ValueError:
            record = make_record(level=logging.ERROR)
            record.exc_info = sys.exc_info()

        payload = json.loads(StructuredJSONFormatter().format(record))

        assert "ValueError: broken" in payload["exception"]


class TestHumanReadableFormatter:
    """Tests for the console formatter."""

    def test_info_is_short(self):
        line = HumanReadableFormatter().format(make_record())

        assert line.endswith("[-] INFO: hello")

    def test_error_has_location(self):
        line = HumanReadableFormatter().format(
            make_record(level=logging.ERROR, msg="failed")
        )

        assert "ERROR:" in line
        assert ".handler:10 - failed" in line

    def test_correlation_id_is_shown(self):
        token = correlation_id.set("abcd1234")
        try:
            line = HumanReadableFormatter().format(make_record())
        finally:
            correlation_id.reset(token)

        assert "[abcd1234]" in line


class TestExcludePathsFilter:
    """Tests for the access log path filter."""

    def test_excluded_path_is_dropped(self):
        record = make_record(msg='127.0.0.1 - "GET /openapi.json HTTP/1.1" 200')

        assert ExcludePathsFilter(["/openapi.json"]).filter(record) is False

    def test_other_paths_are_kept(self):
        record = make_record(msg='127.0.0.1 - "POST /authors HTTP/1.1" 201')

        assert ExcludePathsFilter(["/openapi.json"]).filter(record) is True

    def test_defaults_come_from_settings(self):
        assert ExcludePathsFilter().excluded_paths == ["/docs", "/openapi.json"]

    def test_installed_on_uvicorn_access_logger(self):
        filters = logging.getLogger("uvicorn.access").filters

        assert any(isinstance(f, ExcludePathsFilter) for f in filters)
