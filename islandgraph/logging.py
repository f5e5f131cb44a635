"""Centralized logging configuration for islandgraph."""

import logging
import sys
from typing import Optional, Set

# Flag to track if we've already set up the root logger
_ROOT_LOGGER_CONFIGURED = False

_ROOT_LOGGER_NAME = "islandgraph"

# Sub-loggers whose level was set by set_component_log_level.
_COMPONENT_LOGGERS: Set[str] = set()


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Set up the root islandgraph logger with a single handler.

    Repeated calls are no-ops until ``reset_logging`` is called.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to StreamHandler on stdout).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits from the ``islandgraph`` root logger.

    Args:
        name: Logger name (typically __name__ from calling module).

    Returns:
        Configured logger instance.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for all islandgraph loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    setup_root_logger()

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Disable debug logging, set to INFO level."""
    set_global_log_level(logging.INFO)


def set_component_log_level(component: str, level: int) -> logging.Logger:
    """Set the level of one islandgraph subsystem independently of the root.

    Root handlers are lowered to ``level`` when needed so the component's
    records reach them. Other subsystems are still filtered by the root
    logger's own level.

    Args:
        component: Dotted name below ``islandgraph``, e.g. ``"algorithms"``.
        level: Logging level for that subtree.

    Returns:
        The component logger.
    """
    setup_root_logger()

    name = f"{_ROOT_LOGGER_NAME}.{component}"
    logger = logging.getLogger(name)
    logger.setLevel(level)
    _COMPONENT_LOGGERS.add(name)

    for handler in logging.getLogger(_ROOT_LOGGER_NAME).handlers:
        if handler.level > level:
            handler.setLevel(level)
    return logger


def enable_trace_logging() -> None:
    """Emit per-island DEBUG records from the traversal algorithms only."""
    set_component_log_level("algorithms", logging.DEBUG)


def reset_logging() -> None:
    """Reset logging configuration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    for name in _COMPONENT_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)
    _COMPONENT_LOGGERS.clear()

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
