"""Test the centralized logging functionality."""

import logging
from io import StringIO

from algograph.logging import (
    LOG_FORMAT,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


def test_centralized_logging():
    """Test that centralized logging works properly."""
    logger = get_logger("algograph.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("Test info message")
    assert "Test info message" in log_capture.getvalue()

    # Debug should not appear by default
    log_capture.seek(0)
    log_capture.truncate(0)
    logger.debug("Test debug message")
    assert "Test debug message" not in log_capture.getvalue()

    enable_debug_logging()
    logger.debug("Test debug message after enable")
    assert "Test debug message after enable" in log_capture.getvalue()

    disable_debug_logging()
    logger.handlers.clear()


def test_logger_naming():
    """Test that loggers use consistent naming."""
    logger = get_logger("algograph.lib.algorithms.spf")
    assert logger.name == "algograph.lib.algorithms.spf"
    assert logger.level == logging.NOTSET


def test_multiple_loggers():
    """Test that multiple loggers can be created and configured."""
    logger1 = get_logger("algograph.module1")
    logger2 = get_logger("algograph.module2")

    assert logger1 is not logger2

    set_global_log_level(logging.WARNING)
    root_logger = logging.getLogger("algograph")
    assert root_logger.level == logging.WARNING
    assert logger1.getEffectiveLevel() == logging.WARNING


def test_reset_logging_allows_custom_handler():
    """After a reset, setup_root_logger installs the handler it is given."""
    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))
    reset_logging()
    try:
        setup_root_logger(level=logging.DEBUG, handler=handler)
        get_logger("algograph.custom").debug("custom handler")
        assert "DEBUG:custom handler" in log_capture.getvalue()
    finally:
        reset_logging()
        setup_root_logger()


def test_default_format_applied_to_bare_handler():
    """A handler without a formatter gets LOG_FORMAT."""
    handler = logging.StreamHandler(StringIO())
    reset_logging()
    try:
        setup_root_logger(handler=handler)
        assert handler.formatter._fmt == LOG_FORMAT
        # A second call keeps the installed handler.
        setup_root_logger()
        assert logging.getLogger("algograph").handlers == [handler]
    finally:
        reset_logging()
        setup_root_logger()


def test_solver_debug_messages_are_captured(caplog):
    """Solvers log through the algograph hierarchy, so pytest can capture them."""
    from algograph import Graph, dijkstra

    graph = Graph(2)
    graph.add_edge(0, 1, 3)
    with caplog.at_level(logging.DEBUG, logger="algograph"):
        dijkstra(graph, 0)
    assert any("Dijkstra from 0" in record.getMessage() for record in caplog.records)
