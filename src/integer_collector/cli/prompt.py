"""Interactive input prompt and input-feedback messages.

This module is responsible for:

* Asking the user for the next integer via a questionary text prompt.
* Building the message shown when the input is neither an integer nor
  the exit keyword, including the "did you mean" suggestion.

No classification logic lives here; that belongs to
:mod:`integer_collector.core.input_parser`.
"""

from __future__ import annotations

from typing import Any

from integer_collector.core.models import InputOutcome
from integer_collector.exceptions import EnvironmentError, InputCancelledError

BANNER: str = "[bold white]Integer Collector[/bold white]"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _escape(text: str) -> str:
    """Escape Rich markup in user-supplied *text* when Rich is available."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def _ordinal(position: int) -> str:
    """Render ``1`` as ``"1st"``, ``2`` as ``"2nd"``, ``11`` as ``"11th"``."""
    if 10 <= position % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(position % 10, "th")
    return f"{position}{suffix}"


def build_prompt_message(position: int, exit_keyword: str) -> str:
    """Return the plain-text question asked before each entry."""
    return f"Enter the {_ordinal(position)} integer or type '{exit_keyword}' to finish:"


def build_invalid_input_message(outcome: InputOutcome, exit_keyword: str) -> str:
    """Return the Rich-markup message for an input that was not accepted."""
    keyword = f"[green italic]{_escape(exit_keyword)}[/green italic]"
    message = f"The command [red italic]{_escape(outcome.raw)}[/red italic] is not valid. "
    if outcome.suggest_exit:
        return message + f"Maybe you meant the {keyword} command."
    return message + f"Please enter an [blue italic]integer[/blue italic] or {keyword}."


# ---------------------------------------------------------------------------
# Public prompt function
# ---------------------------------------------------------------------------

def prompt_for_entry(position: int, exit_keyword: str) -> str:
    """Ask for the next entry and return the text exactly as typed.

    Raises
    ------
    InputCancelledError
        If the user cancels the prompt (questionary returns ``None``).
    """
    questionary = _import_questionary()

    answer: str | None = questionary.text(
        build_prompt_message(position, exit_keyword),
    ).ask()  # Returns None on Ctrl+C

    if answer is None:
        raise InputCancelledError(
            "Input cancelled.",
            hint=f"Type '{exit_keyword}' to finish and see your numbers sorted.",
        )
    return answer
