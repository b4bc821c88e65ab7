"""Interactive read loop wiring the core session to the terminal.

Flow per turn:

1. Clear the screen (optional) and show the banner.
2. Ask for the next entry.
3. Hand it to :class:`~integer_collector.core.collector.CollectorSession`.
4. On invalid input, explain and pause; on the exit keyword, finish.

Finishing reveals the collected integers, animates the incremental sort
and prints the result.  Collaborators (reader, sleep) are injectable so
the whole loop runs without a terminal in tests.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from integer_collector.cli import exit_codes
from integer_collector.cli.console import console
from integer_collector.cli.progress import (
    SortProgressDisplay,
    render_sorted,
    reveal_collected_numbers,
)
from integer_collector.cli.prompt import BANNER, build_invalid_input_message, prompt_for_entry
from integer_collector.core.collector import CollectorSession
from integer_collector.core.models import CollectorSettings, InputKind

logger = logging.getLogger(__name__)

EntryReader = Callable[[int, str], str]


class InteractiveCollector:
    """Runs one collection session until the exit keyword is entered.

    Parameters
    ----------
    settings:
        Keyword, threshold and timing for this run.
    read_entry:
        Callable ``(position, exit_keyword) -> str``.  Defaults to the
        questionary prompt.
    sleep:
        Delay function used for pauses and animation frames.
    """

    def __init__(
        self,
        settings: CollectorSettings,
        *,
        read_entry: EntryReader | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._settings: CollectorSettings = settings
        self._session: CollectorSession = CollectorSession(settings)
        self._read_entry: EntryReader = read_entry or prompt_for_entry
        self._sleep: Callable[[float], None] = sleep

    @property
    def session(self) -> CollectorSession:
        return self._session

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Loop until the exit keyword, then report.  Returns an exit code."""
        keyword = self._settings.exit_keyword
        while True:
            self._refresh_screen()
            raw = self._read_entry(self._session.next_position, keyword)
            outcome = self._session.submit(raw)

            if outcome.kind is InputKind.EXIT:
                return self._finish()

            if outcome.kind is InputKind.INVALID:
                logger.debug(
                    "Rejected %r (distance %s to %r)", raw, outcome.distance, keyword,
                )
                console.print(build_invalid_input_message(outcome, keyword))
                self._sleep(self._settings.error_pause)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _refresh_screen(self) -> None:
        if self._settings.clear_screen:
            console.clear()
        console.print(BANNER)
        console.print()

    def _finish(self) -> int:
        self._refresh_screen()
        numbers = self._session.numbers
        if not numbers:
            self._display_nothing_collected()
            return exit_codes.SUCCESS

        reveal_collected_numbers(
            numbers, delay=self._settings.step_delay, sleep=self._sleep,
        )
        sorter = self._session.sorter()
        with SortProgressDisplay(delay=self._settings.step_delay, sleep=self._sleep) as display:
            result = sorter.sort(on_swap=display)
        console.print(render_sorted(result))
        return exit_codes.SUCCESS

    def _display_nothing_collected(self) -> None:
        console.print(
            "You [green italic]exited[/green italic] without entering any "
            "[blue italic]integer[/blue italic]."
        )
        console.print("To try again, start the application again. See you next time!")
