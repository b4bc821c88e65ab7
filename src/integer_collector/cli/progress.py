"""Rich live displays for the end-of-collection animation.

This module bridges the core sorter's swap observer with a Rich
:class:`~rich.live.Live` region.  It is used by the CLI layer only — the
core sorter merely calls whatever observer it is given.

Design
------
* :class:`SortProgressDisplay` is a callable swap observer that owns a
  Live context and redraws one line per swap.
* :func:`reveal_collected_numbers` replays the collected integers one
  at a time in input order.
* Frame renderers are pure and return Rich markup strings.
* Delays go through an injectable ``sleep`` so tests run instantly.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from typing import Any

from integer_collector.cli.console import get_rich_console
from integer_collector.exceptions import EnvironmentError

LOADING_FRAMES: tuple[str, ...] = ("◐", "◓", "◑", "◒")


def _create_live() -> Any:
    """Build a manually refreshed Rich Live region on the stderr console."""
    try:
        from rich.live import Live
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Live(console=get_rich_console(), auto_refresh=False, transient=False)


# ---------------------------------------------------------------------------
# Frame renderers (pure)
# ---------------------------------------------------------------------------

def format_values(values: Sequence[int]) -> str:
    """Render integers as ``"[3, 1, 2]"``."""
    return "[" + ", ".join(str(value) for value in values) + "]"


def render_reveal_frame(values: Sequence[int]) -> str:
    """Line showing the collected integers revealed so far."""
    joined = ", ".join(str(value) for value in values)
    return f"The [cyan italic]chosen[/cyan italic] numbers were: {joined}"


def render_sort_frame(frame_index: int, snapshot: Sequence[int]) -> str:
    """Line showing one intermediate sort state behind a spinner glyph."""
    glyph = LOADING_FRAMES[frame_index % len(LOADING_FRAMES)]
    return f"{glyph} [yellow italic]Sorting[/yellow italic]... {format_values(snapshot)}"


def render_sorted(values: Sequence[int]) -> str:
    """Final line with the fully sorted integers."""
    return f"[green italic]Sorted[/green italic]: {format_values(values)}"


# ---------------------------------------------------------------------------
# Progressive reveal
# ---------------------------------------------------------------------------

def reveal_collected_numbers(
    numbers: Sequence[int],
    *,
    delay: float,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Show ``numbers[:1]``, ``numbers[:2]``, ... pausing *delay* between frames."""
    with _create_live() as live:
        for end in range(1, len(numbers) + 1):
            live.update(render_reveal_frame(numbers[:end]), refresh=True)
            sleep(delay)


# ---------------------------------------------------------------------------
# Sort observer
# ---------------------------------------------------------------------------

class SortProgressDisplay:
    """Callable swap observer that animates an incremental sort.

    Usage::

        with SortProgressDisplay(delay=0.75) as display:
            sorter.sort(on_swap=display)
    """

    def __init__(
        self,
        *,
        delay: float,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._live: Any = _create_live()
        self._delay: float = delay
        self._sleep: Callable[[float], None] = sleep
        self._frame: int = 0
        self._started: bool = False
        self.frames_shown: int = 0

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> SortProgressDisplay:
        self.start()
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start the Live region."""
        if not self._started:
            self._live.start()
            self._started = True

    def stop(self) -> None:
        """Stop the Live region (idempotent)."""
        if self._started:
            self._live.stop()
            self._started = False

    # ------------------------------------------------------------------
    # Observer callback
    # ------------------------------------------------------------------

    def __call__(self, snapshot: tuple[int, ...]) -> None:
        """Redraw with *snapshot*, advance the spinner, then wait."""
        if not self._started:
            return

        self._live.update(render_sort_frame(self._frame, snapshot), refresh=True)
        self._frame = (self._frame + 1) % len(LOADING_FRAMES)
        self.frames_shown += 1
        self._sleep(self._delay)
