"""
Logging configuration module for the simulator.

Routes the records of the combat core (and of catchery) to a rich console
handler, and provides the info/debug helpers used for the lifecycle messages
of an encounter.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

# Name of the logger the combat core writes its lifecycle messages to.
COMBAT_LOGGER_NAME = "autobattle"


def setup_logging(level: int = logging.INFO) -> None:
    """
    Installs a rich handler on the root logger.

    Calling it again replaces the previous handler, so the demo can switch
    between normal and verbose output.

    Args:
        level (int): The root logging level. Defaults to logging.INFO.

    """
    handler = RichHandler(
        console=Console(width=120, force_terminal=True, force_jupyter=False),
        show_time=True,
        show_level=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
    )
    handler.setFormatter(
        logging.Formatter("%(name)s - %(message)s", datefmt="[%X]")
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def get_logger(name: str = COMBAT_LOGGER_NAME) -> logging.Logger:
    """Returns the logger of a component, the combat logger by default."""
    return logging.getLogger(name)


logger = get_logger()


def _with_context(message: str, context: dict[str, Any] | None) -> str:
    if not context:
        return message
    pairs = " ".join(f"{key}={value}" for key, value in context.items())
    return f"{message} [{pairs}]"


def log_info(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs an encounter milestone (start, end, defeat, resume).

    Args:
        message (str): The message.
        context (dict[str, Any] | None): Key/value pairs appended to the message.

    """
    logger.info(_with_context(message, context))


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    logger.debug(_with_context(message, context))
