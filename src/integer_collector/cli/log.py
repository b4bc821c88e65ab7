"""Logging setup for the CLI process.

Library modules only create ``logging.getLogger(__name__)`` loggers;
handlers are attached here, once, by the entry point.
"""

from __future__ import annotations

import logging

from integer_collector.cli.console import get_rich_console
from integer_collector.exceptions import EnvironmentError


def configure_logging(verbose: bool = False) -> None:
    """Route package logs to stderr, through Rich when it is installed.

    Parameters
    ----------
    verbose:
        ``True`` enables DEBUG output; otherwise only warnings show.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    try:
        from rich.logging import RichHandler

        handler: logging.Handler = RichHandler(
            console=get_rich_console(),
            show_path=False,
            rich_tracebacks=True,
        )
        fmt = "%(message)s"
    except (ModuleNotFoundError, EnvironmentError):
        handler = logging.StreamHandler()
        fmt = "%(levelname)s %(name)s: %(message)s"

    handler.setFormatter(logging.Formatter(fmt))
    package_logger = logging.getLogger("integer_collector")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
