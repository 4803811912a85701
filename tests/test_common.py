"""Tests for common utilities."""

import json
import logging

import pytest
from starlette.datastructures import Headers

from forwarded.lib.common.headers import first_list_entry, get_header, parse_header_line
from forwarded.lib.common.logging_config import JsonFormatter, PARSER_LOGGER, get_logger, setup_logging
from forwarded.lib.parser import parse_forwarded_value


class TestHeaders:
    """Test header utilities."""

    def test_get_header_case_insensitive(self):
        headers = {"X-Forwarded-Proto": "https"}
        assert get_header(headers, "x-forwarded-proto") == "https"
        assert get_header(headers, "X-FORWARDED-PROTO") == "https"

    def test_get_header_missing(self):
        assert get_header({}, "Forwarded") == ""
        assert get_header(None, "Forwarded") == ""
        assert get_header({"Forwarded": None}, "Forwarded") == ""
        assert get_header({"Forwarded": []}, "Forwarded") == ""

    def test_get_header_first_line(self):
        assert get_header({"Forwarded": ("for=a", "for=b")}, "forwarded") == "for=a"

    def test_get_header_starlette(self):
        headers = Headers(raw=[(b"x-forwarded-for", b"1.1.1.1"), (b"x-forwarded-for", b"2.2.2.2")])
        assert get_header(headers, "X-Forwarded-For") == "1.1.1.1"

    @pytest.mark.parametrize("value,expected", [
        ("1.1.1.1", "1.1.1.1"),
        (" 1.1.1.1 , 2.2.2.2", "1.1.1.1"),
        (",2.2.2.2", ""),
        ("", ""),
    ])
    def test_first_list_entry(self, value, expected):
        assert first_list_entry(value) == expected

    def test_parse_header_line(self):
        assert parse_header_line("Forwarded: for=1.2.3.4;host=a:80") == ("Forwarded", "for=1.2.3.4;host=a:80")

    @pytest.mark.parametrize("line", ["no colon", ": value"])
    def test_parse_header_line_invalid(self, line):
        with pytest.raises(ValueError):
            parse_header_line(line)


class TestLogging:
    """Test logging configuration."""

    def test_setup_logging_level(self):
        logger = setup_logging(level="WARNING")
        assert logger.name == "forwarded"
        assert logger.level == logging.WARNING

    def test_setup_logging_replaces_handlers(self):
        setup_logging(level="INFO")
        logger = setup_logging(level="INFO")
        assert len(logger.handlers) == 1

    def test_setup_logging_file(self, tmp_path):
        log_file = tmp_path / "forwarded.log"
        logger = setup_logging(level="INFO", log_file=str(log_file), json_format=True)
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert '"message": "hello"' in log_file.read_text()

        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    def test_unknown_level_defaults_to_info(self):
        assert setup_logging(level="chatty").level == logging.INFO

    def test_get_logger(self):
        assert get_logger("forwarded.web").name == "forwarded.web"

    def test_json_formatter_fields(self):
        record = logging.LogRecord("forwarded.web", logging.INFO, __file__, 1, 'say "hi"', None, None)
        record.forwarded_for = "192.0.2.43"
        record.peer = "10.0.0.1"

        payload = json.loads(JsonFormatter().format(record))

        assert payload["message"] == 'say "hi"'
        assert payload["logger"] == "forwarded.web"
        assert payload["forwarded_for"] == "192.0.2.43"
        assert payload["peer"] == "10.0.0.1"
        assert "forwarded_host" not in payload

    @pytest.mark.parametrize("enabled,expected", [(True, True), (False, False)])
    def test_log_dropped_segments(self, tmp_path, enabled, expected):
        log_file = tmp_path / "parser.log"
        logger = setup_logging(level="WARNING", log_file=str(log_file), log_dropped_segments=enabled)

        parse_forwarded_value("secret=abc;for=1.2.3.4")
        for handler in logger.handlers:
            handler.flush()

        assert ("secret=abc" in log_file.read_text()) is expected
        assert get_logger(PARSER_LOGGER).level == (logging.DEBUG if enabled else logging.NOTSET)

        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
