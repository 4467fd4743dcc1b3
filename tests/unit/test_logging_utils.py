#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Unit tests for logging configuration."""

import io
import logging

import pytest

from somedoc import Column, Document, Row, Table, configure_logging, render
from somedoc.logging_utils import SIMPLE_FORMAT, TRACE_FORMAT


@pytest.fixture
def package_logger():
    """Restore the somedoc logger and the root logger after a test reconfigures them."""
    logger = logging.getLogger("somedoc")
    root = logging.getLogger()
    saved = (list(logger.handlers), logger.level, logger.propagate, list(root.handlers))
    yield logger
    handlers, level, propagate, root_handlers = saved
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    root.handlers[:] = root_handlers


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configures_package_logger(self, package_logger):
        logger = configure_logging("debug")
        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert logger.handlers[0].formatter._fmt == SIMPLE_FORMAT

    def test_root_logger_untouched(self, package_logger):
        root = logging.getLogger()
        root_handlers = list(root.handlers)
        configure_logging("INFO")
        assert root.handlers == root_handlers

    def test_numeric_level(self, package_logger):
        assert configure_logging(logging.WARNING).level == logging.WARNING

    def test_unknown_name_falls_back_to_info(self, package_logger):
        assert configure_logging("chatty").level == logging.INFO

    def test_trace_mode(self, package_logger):
        logger = configure_logging("INFO", trace_mode=True)
        assert logger.handlers[0].formatter._fmt == TRACE_FORMAT

    def test_reconfigure_replaces_only_own_handlers(self, package_logger):
        foreign = logging.NullHandler()
        package_logger.addHandler(foreign)
        configure_logging("INFO")
        configure_logging("DEBUG")
        own = [handler for handler in package_logger.handlers if handler is not foreign]
        assert foreign in package_logger.handlers
        assert len(own) == 1

    def test_renderer_records_reach_stream(self, package_logger):
        stream = io.StringIO()
        configure_logging("WARNING", stream=stream)
        table = Table([Column("A"), Column("B")], [Row.from_strings("1")])
        render(Document().add_table(table), "markdown+gfm")
        assert "WARNING: Table row 0 has 1 cells for 2 columns" in stream.getvalue()
        assert "DEBUG" not in stream.getvalue()

    def test_debug_records_reach_stream(self, package_logger):
        stream = io.StringIO()
        configure_logging("DEBUG", stream=stream)
        render(Document(), "markdown+gfm")
        assert "DEBUG: Using MarkdownRenderer" in stream.getvalue()

    def test_log_file(self, package_logger, tmp_path):
        log_file = tmp_path / "somedoc.log"
        logger = configure_logging("DEBUG", log_file=str(log_file), stream=io.StringIO())
        assert len(logger.handlers) == 2
        logging.getLogger("somedoc.renderers.markdown").debug("hello file")
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "Logging to file" in content
        assert "hello file" in content

    def test_unwritable_log_file_warns(self, package_logger, tmp_path):
        stream = io.StringIO()
        configure_logging("INFO", log_file=str(tmp_path / "missing" / "x.log"), stream=stream)
        assert "Could not create log file" in stream.getvalue()
