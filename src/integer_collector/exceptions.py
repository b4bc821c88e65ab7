"""Custom exception hierarchy for integer-collector.

The core engines (edit distance, incremental sort) are total over their
input domains and raise nothing.  Every error that reaches the user is a
subclass of :class:`IntegerCollectorError`, so the CLI error boundary can
render a clean message without leaking internal stack traces.

Hierarchy
---------
IntegerCollectorError
├── InvalidSettingsError
├── InputCancelledError
└── EnvironmentError
"""

from __future__ import annotations


class IntegerCollectorError(Exception):
    """Base exception for all integer-collector errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class InvalidSettingsError(IntegerCollectorError):
    """Raised when command-line settings are out of range."""


# --- Interaction -----------------------------------------------------------

class InputCancelledError(IntegerCollectorError):
    """Raised when the user dismisses the input prompt (Ctrl+C / Esc)."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(IntegerCollectorError):
    """Raised when a required runtime dependency is not available."""
