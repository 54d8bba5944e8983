"""
Configuration defaults and logging setup for reactodo.

The defaults live as module constants so an application can read them without
building a config object; ``TodoConfig`` bundles the ones a ``TodoApp`` needs.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

# ==============================================================================================
# Configuration and Constants
# ==============================================================================================

# Logging configuration
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(message)s"
LOGGER_NAME = "reactodo"

# Seed data shown on startup: (id, description)
SEED_TODOS: Tuple[Tuple[str, str], ...] = (
    ("todo-0", "hi"),
    ("todo-1", "hello"),
    ("todo-2", "bonjour"),
)

# Completion flag given to todos created by TodoList.add() without an explicit flag.
COMPLETED_BY_DEFAULT = False


@dataclass(frozen=True)
class TodoConfig:
    """
    Settings for a TodoApp.

    Attributes:
        seed: Start the list with the SEED_TODOS entries.
        completed_by_default: Completion flag for todos added without one.
        log_level: Level passed to configure_logging() by entry points.
    """

    seed: bool = True
    completed_by_default: bool = COMPLETED_BY_DEFAULT
    log_level: int = LOG_LEVEL


# Console handler with simplified formatter, attached by configure_logging()
console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: int = LOG_LEVEL) -> logging.Logger:
    """
    Attach the console handler to the package logger.

    Calling this more than once only adjusts the level; the handler is
    installed a single time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    console_handler.setLevel(level)

    if console_handler not in logger.handlers:
        logger.addHandler(console_handler)

    return logger
