"""Tests for structured logging configuration."""

import logging

import structlog

from cli.logging_config import MAX_VALUE_CHARS, _shorten_long_values, setup_logging


class TestLoggingConfig:
    """Test structlog setup modes."""

    def teardown_method(self):
        logging.getLogger().handlers.clear()

    def test_console_mode(self):
        """Console mode uses dev renderer."""
        setup_logging(json_mode=False, level="DEBUG")
        logger = structlog.get_logger()
        logger.info("test message", key="value")

    def test_json_mode(self, capsys):
        """JSON mode produces parseable JSON."""
        setup_logging(json_mode=True, level="DEBUG")
        stdlib_logger = logging.getLogger("test_json")
        stdlib_logger.info("json test")

    def test_level_filtering(self):
        """Log level filters lower messages."""
        setup_logging(json_mode=False, level="WARNING")
        root = logging.getLogger()
        assert root.level == logging.WARNING

    def test_default_level_is_info(self):
        """Default level param is INFO."""
        setup_logging()
        root = logging.getLogger()
        assert root.level == logging.INFO

    def test_processor_chain(self):
        setup_logging(json_mode=True, level="DEBUG")
        config = structlog.get_config()
        assert _shorten_long_values in config["processors"]

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "kbchat.log"
        setup_logging(level="WARNING", log_file=log_file)
        logging.getLogger("kbchat.test").debug("written to file only")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "written to file only" in log_file.read_text()
        assert logging.getLogger().level == logging.DEBUG


class TestShortenLongValues:
    def test_long_value_clipped(self):
        event = {"event": "fact_learned", "answer": "x" * 500}
        out = _shorten_long_values(None, None, event)
        assert out["answer"] == "x" * MAX_VALUE_CHARS + "..."

    def test_event_name_untouched(self):
        name = "e" * 500
        out = _shorten_long_values(None, None, {"event": name})
        assert out["event"] == name

    def test_short_and_non_string_values_untouched(self):
        event = {"event": "x", "entity": "SIT", "count": 3}
        assert _shorten_long_values(None, None, dict(event)) == event
