import logging
import pytest
from unittest.mock import MagicMock

from orderdesk.core import logging_config
from orderdesk.core.logging_config import NamespaceFilter, setup_logging


@pytest.fixture
def logging_env():
    """
    A pytest fixture to set up and tear down a controlled logging environment for tests.

    This fixture provides a mock handler and ensures that the orderdesk loggers
    are clean before and after each test, preventing interference between them.

    Yields:
        MagicMock: A mock logging handler to inspect the records it accepted.
    """
    test_handler = MagicMock()
    test_handler.level = logging.NOTSET
    test_handler.filters = []

    def add_filter(filter_obj):
        test_handler.filters.append(filter_obj)
        return filter_obj

    # Apply all filters, keep what passes
    accepted_records = []
    def handle(record):
        for f in test_handler.filters:
            if not f.filter(record):
                return False
        accepted_records.append(record)
        return True

    test_handler.addFilter = MagicMock(side_effect=add_filter)
    test_handler.handle = MagicMock(side_effect=handle)
    test_handler.accepted_records = accepted_records

    loggers_to_manage = [
        "orderdesk", "orderdesk.features.clients", "orderdesk.features.reports",
        "orderdesk.features.clients.service", "orderdesk.features.reports.service", "orderdesk.main",
    ]

    def reset():
        for logger_name in loggers_to_manage:
            logger = logging.getLogger(logger_name)
            logger.handlers = []
            logger.filters = []
            logger.setLevel(logging.NOTSET)
        logging_config._console_handler = None

    reset()
    yield test_handler
    reset()


def _setup_logger(name, level, handler_to_add):
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = [handler_to_add]
    logger.propagate = True
    return logger


def get_handled_messages(test_handler: MagicMock) -> list[str]:
    return [f"{r.name}:{r.levelname}:{r.getMessage()}" for r in test_handler.accepted_records]


def test_default_level_propagation(logging_env):
    """
    Tests that feature loggers inherit the level of the "orderdesk" logger.
    """
    _setup_logger("orderdesk", logging.INFO, logging_env)

    clients_logger = logging.getLogger("orderdesk.features.clients")
    reports_logger = logging.getLogger("orderdesk.features.reports")

    clients_logger.debug("Client debug message")
    clients_logger.info("Client info message")
    reports_logger.warning("Report warning message")

    handled_messages = get_handled_messages(logging_env)
    assert "orderdesk.features.clients:DEBUG:Client debug message" not in handled_messages
    assert "orderdesk.features.clients:INFO:Client info message" in handled_messages
    assert "orderdesk.features.reports:WARNING:Report warning message" in handled_messages


def test_namespace_specific_level(logging_env):
    """
    Tests that one feature can log at DEBUG while its parent stays at INFO.
    """
    _setup_logger("orderdesk", logging.INFO, logging_env)
    _setup_logger("orderdesk.features.reports", logging.DEBUG, logging_env)

    logging.getLogger("orderdesk.features.reports").debug("Report debug")
    logging.getLogger("orderdesk.features.clients").debug("Client debug")

    handled_messages = get_handled_messages(logging_env)
    assert "orderdesk.features.reports:DEBUG:Report debug" in handled_messages
    assert "orderdesk.features.clients:DEBUG:Client debug" not in handled_messages


def test_namespace_filter_allow(logging_env):
    """
    Tests that the NamespaceFilter lets through only the listed namespaces.
    """
    _setup_logger("orderdesk", logging.DEBUG, logging_env)
    logging_env.addFilter(NamespaceFilter(allowed_namespaces=["orderdesk.features.reports"]))

    logging.getLogger("orderdesk.features.reports.service").info("Report message")
    logging.getLogger("orderdesk.features.clients.service").info("Client message")
    logging.getLogger("orderdesk.main").info("Main message")

    handled_messages = get_handled_messages(logging_env)
    assert handled_messages == ["orderdesk.features.reports.service:INFO:Report message"]


def test_namespace_filter_allow_all_if_empty(logging_env):
    _setup_logger("orderdesk", logging.DEBUG, logging_env)
    logging_env.addFilter(NamespaceFilter(allowed_namespaces=[]))

    logging.getLogger("orderdesk.features.clients").info("Client message")
    logging.getLogger("orderdesk.features.reports").info("Report message")

    assert len(get_handled_messages(logging_env)) == 2


def test_setup_logging_does_not_stack_handlers(logging_env):
    """
    Tests that calling setup_logging twice leaves a single handler on the
    "orderdesk" logger, configured by the second call.
    """
    setup_logging(level="WARNING", allowed_namespaces=[])
    app_logger = setup_logging(level="DEBUG", allowed_namespaces=["orderdesk.features"])

    assert app_logger.name == "orderdesk"
    assert app_logger.level == logging.DEBUG
    assert len(app_logger.handlers) == 1
    (ns_filter,) = app_logger.handlers[0].filters
    assert isinstance(ns_filter, NamespaceFilter)
    assert ns_filter.allowed_namespaces == ["orderdesk.features"]


def test_setup_logging_without_namespaces_adds_no_filter(logging_env):
    app_logger = setup_logging(level="INFO", allowed_namespaces=[])
    assert app_logger.handlers[0].filters == []
