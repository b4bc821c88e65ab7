"""Collector session — the state behind one interactive run.

The session accumulates the integers typed so far and hands out an
:class:`~integer_collector.core.sorter.IncrementalSorter` over them once
the user exits.  It never prompts or prints; the CLI layer owns the loop.
"""

from __future__ import annotations

import logging

from integer_collector.core.input_parser import classify_input
from integer_collector.core.models import CollectorSettings, InputKind, InputOutcome
from integer_collector.core.sorter import IncrementalSorter

logger = logging.getLogger(__name__)


class CollectorSession:
    """Accumulates integers submitted one line at a time.

    Parameters
    ----------
    settings:
        Exit keyword and suggestion threshold used to classify input.
    """

    def __init__(self, settings: CollectorSettings | None = None) -> None:
        self._settings: CollectorSettings = settings or CollectorSettings()
        self._numbers: list[int] = []

    @property
    def settings(self) -> CollectorSettings:
        return self._settings

    @property
    def numbers(self) -> tuple[int, ...]:
        """Integers collected so far, in input order."""
        return tuple(self._numbers)

    @property
    def next_position(self) -> int:
        """1-based position of the next integer to be collected."""
        return len(self._numbers) + 1

    def submit(self, raw: str) -> InputOutcome:
        """Classify *raw* and record it when it is a number."""
        outcome = classify_input(
            raw,
            self._settings.exit_keyword,
            self._settings.suggestion_threshold,
        )
        if outcome.kind is InputKind.NUMBER and outcome.value is not None:
            self._numbers.append(outcome.value)
        logger.debug("Input %r classified as %s", raw, outcome.kind.value)
        return outcome

    def sorter(self) -> IncrementalSorter:
        """Return a fresh sorter over a copy of the collected integers."""
        return IncrementalSorter(self._numbers)
