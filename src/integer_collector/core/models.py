"""Domain models for integer-collector.

All models are **frozen** dataclasses — immutable value objects carrying
no I/O and no dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from integer_collector.exceptions import InvalidSettingsError


# ---------------------------------------------------------------------------
# Classified user input
# ---------------------------------------------------------------------------

class InputKind(enum.Enum):
    """What a single line of user input turned out to be."""

    NUMBER = "number"
    EXIT = "exit"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class InputOutcome:
    """Result of classifying one line typed by the user."""

    kind: InputKind

    raw: str
    """The text exactly as typed."""

    value: int | None = None
    """Parsed integer, set only for :attr:`InputKind.NUMBER`."""

    distance: int | None = None
    """Edit distance to the exit keyword, set only for :attr:`InputKind.INVALID`."""

    suggest_exit: bool = False
    """``True`` when the input is close enough to the exit keyword."""


# ---------------------------------------------------------------------------
# Runtime settings
# ---------------------------------------------------------------------------

DEFAULT_EXIT_KEYWORD: str = "exit"
DEFAULT_SUGGESTION_THRESHOLD: int = 3
DEFAULT_STEP_DELAY: float = 0.75
DEFAULT_ERROR_PAUSE: float = 3.0


@dataclass(frozen=True, slots=True)
class CollectorSettings:
    """Knobs for one interactive collection run.

    Raises
    ------
    InvalidSettingsError
        If the keyword is blank or any numeric setting is negative.
    """

    exit_keyword: str = DEFAULT_EXIT_KEYWORD
    """Command that ends collection (matched case-insensitively)."""

    suggestion_threshold: int = DEFAULT_SUGGESTION_THRESHOLD
    """Largest edit distance at which the exit keyword is suggested."""

    step_delay: float = DEFAULT_STEP_DELAY
    """Seconds between animation frames when revealing and sorting."""

    error_pause: float = DEFAULT_ERROR_PAUSE
    """Seconds the invalid-input message stays on screen."""

    clear_screen: bool = True
    """Clear the terminal before every prompt."""

    def __post_init__(self) -> None:
        if not self.exit_keyword.strip():
            raise InvalidSettingsError(
                "The exit keyword must not be blank.",
                hint="Pass a word such as --exit-keyword quit.",
            )
        if self.suggestion_threshold < 0:
            raise InvalidSettingsError(
                f"Suggestion threshold must be >= 0, got {self.suggestion_threshold}.",
            )
        if self.step_delay < 0:
            raise InvalidSettingsError(
                f"Step delay must be >= 0 seconds, got {self.step_delay}.",
            )
        if self.error_pause < 0:
            raise InvalidSettingsError(
                f"Error pause must be >= 0 seconds, got {self.error_pause}.",
            )
