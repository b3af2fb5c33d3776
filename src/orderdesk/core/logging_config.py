import logging
import sys
from typing import Optional

from . import config


class NamespaceFilter(logging.Filter):
    def __init__(self, allowed_namespaces=None):
        super().__init__()
        self.allowed_namespaces = allowed_namespaces if allowed_namespaces is not None else []

    def filter(self, record):
        if not self.allowed_namespaces:
            return True  # If no namespaces are specified, allow all records
        return any(record.name.startswith(ns) for ns in self.allowed_namespaces)


log_formatter = logging.Formatter(
    fmt="%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

_console_handler: Optional[logging.Handler] = None


def setup_logging(
    level: str = config.LOG_LEVEL,
    allowed_namespaces: Optional[list[str]] = None,
) -> logging.Logger:
    """
    Configures the "orderdesk" logger with a single stdout handler.

    Modules log through logging.getLogger(__name__), so their loggers
    ("orderdesk.features.reports.service", ...) inherit this level and handler.
    Calling this again replaces the handler instead of stacking a second one.
    """
    global _console_handler

    app_logger = logging.getLogger("orderdesk")
    app_logger.setLevel(level)
    if _console_handler is not None:
        app_logger.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler(sys.stdout)
    _console_handler.setFormatter(log_formatter)

    namespaces = config.LOG_NAMESPACES if allowed_namespaces is None else allowed_namespaces
    if namespaces:
        _console_handler.addFilter(NamespaceFilter(namespaces))

    app_logger.addHandler(_console_handler)
    return app_logger


# To see the SQL Tortoise emits:
# logging.getLogger("tortoise.db_client").setLevel(logging.DEBUG)
