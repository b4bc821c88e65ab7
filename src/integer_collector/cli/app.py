"""CLI application entry point for integer-collector.

This module is the **sole error boundary** for the entire application.
It catches :class:`~integer_collector.exceptions.IntegerCollectorError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — classification and sorting belong to
  the core layer, the read loop to :mod:`integer_collector.cli.session`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from integer_collector.cli import exit_codes
from integer_collector.cli.console import console
from integer_collector.core.models import (
    DEFAULT_ERROR_PAUSE,
    DEFAULT_EXIT_KEYWORD,
    DEFAULT_STEP_DELAY,
    DEFAULT_SUGGESTION_THRESHOLD,
    CollectorSettings,
)
from integer_collector.exceptions import IntegerCollectorError
from integer_collector.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="integer-collector",
        description=(
            "Collect integers interactively; type the exit keyword to see "
            "them sorted step by step."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--exit-keyword",
        default=DEFAULT_EXIT_KEYWORD,
        help="Command that ends collection (default: %(default)s).",
    )
    parser.add_argument(
        "--suggestion-threshold",
        type=int,
        default=DEFAULT_SUGGESTION_THRESHOLD,
        help=(
            "Largest edit distance at which a mistyped command is answered "
            "with the exit keyword as a suggestion (default: %(default)s)."
        ),
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_STEP_DELAY,
        help="Seconds between animation frames (default: %(default)s).",
    )
    parser.add_argument(
        "--error-pause",
        type=float,
        default=DEFAULT_ERROR_PAUSE,
        help="Seconds an invalid-input message stays visible (default: %(default)s).",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal before each prompt.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )
    return parser


def _settings_from_args(args: argparse.Namespace) -> CollectorSettings:
    """Map parsed flags onto the immutable settings object."""
    return CollectorSettings(
        exit_keyword=args.exit_keyword,
        suggestion_threshold=args.suggestion_threshold,
        step_delay=args.delay,
        error_pause=args.error_pause,
        clear_screen=not args.no_clear,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_collect(settings: CollectorSettings) -> int:
    """Run the interactive collection loop."""
    from integer_collector.cli.session import InteractiveCollector

    return InteractiveCollector(settings).run()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the integer-collector CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    from integer_collector.cli.log import configure_logging

    configure_logging(verbose=args.verbose)

    settings = _settings_from_args(args)
    logger.debug("Starting with %s", settings)
    return _handle_collect(settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except IntegerCollectorError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
