"""Protocols (interfaces) consumed by the core layer.

The sorter only knows the observer through this structural contract, so
the CLI can hand it any callable — a Rich display, a list's ``append``,
a test spy — without the core importing presentation code.
"""

from __future__ import annotations

from typing import Protocol


class SwapObserver(Protocol):
    """Receives the sorter's state right after each adjacent swap.

    Called synchronously on the sorting thread; the sort does not resume
    until the observer returns.
    """

    def __call__(self, snapshot: tuple[int, ...]) -> None:
        """Handle one intermediate state.

        Parameters
        ----------
        snapshot:
            Immutable copy of the partially sorted values.
        """
        ...  # pragma: no cover
