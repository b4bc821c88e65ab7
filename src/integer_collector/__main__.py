"""Allow ``python -m integer_collector`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m integer_collector`` behaves identically to the
``integer-collector`` console script.
"""

from __future__ import annotations

from integer_collector.cli.app import cli

if __name__ == "__main__":
    cli()
