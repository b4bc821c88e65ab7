"""Pure classification of user input lines.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Classification order (enforced by :func:`classify_input`):

1. **Number** — an optional ``-`` followed by ASCII digits.
2. **Exit** — the exit keyword, case-insensitive.
3. **Invalid** — anything else, scored by edit distance to the keyword.
"""

from __future__ import annotations

import re

from integer_collector.core.levenshtein import EditDistanceCalculator
from integer_collector.core.models import (
    DEFAULT_SUGGESTION_THRESHOLD,
    InputKind,
    InputOutcome,
)

_INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def is_integer_literal(text: str) -> bool:
    """Return ``True`` when *text* is a base-10 integer.

    Surrounding whitespace is ignored.  Only ASCII digits count, so
    ``"٣"`` or ``"1_000"`` are rejected even though ``int()`` accepts them.
    """
    return _INTEGER_PATTERN.fullmatch(text.strip()) is not None


def is_exit_command(text: str, exit_keyword: str) -> bool:
    """Return ``True`` when *text* equals *exit_keyword*, ignoring case."""
    return text.strip().lower() == exit_keyword.strip().lower()


def classify_input(
    text: str,
    exit_keyword: str,
    suggestion_threshold: int = DEFAULT_SUGGESTION_THRESHOLD,
) -> InputOutcome:
    """Classify one line of input.

    For invalid input the edit distance between *exit_keyword* and the
    raw *text* decides whether the keyword should be suggested
    (``distance <= suggestion_threshold``).
    """
    if is_integer_literal(text):
        try:
            value = int(text.strip())
        except ValueError:
            # Beyond the interpreter's int-string conversion digit limit.
            pass
        else:
            return InputOutcome(kind=InputKind.NUMBER, raw=text, value=value)

    if is_exit_command(text, exit_keyword):
        return InputOutcome(kind=InputKind.EXIT, raw=text)

    distance = EditDistanceCalculator(exit_keyword, text).distance()
    return InputOutcome(
        kind=InputKind.INVALID,
        raw=text,
        distance=distance,
        suggest_exit=distance <= suggestion_threshold,
    )
