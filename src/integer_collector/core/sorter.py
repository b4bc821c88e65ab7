"""Incremental bubble sort that reports every intermediate state.

The sorter owns a private copy of its input and sorts that copy in
place.  After every adjacent swap it hands an immutable snapshot to an
optional :class:`~integer_collector.core.protocols.SwapObserver`, which is
how the CLI animates the sort.

Invariant
---------
After ``k`` completed passes the ``k`` largest values occupy their final
trailing positions.  A pass with zero swaps ends the sort, so an already
sorted input costs one pass and never notifies the observer.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from integer_collector.core.protocols import SwapObserver

__all__: list[str] = ["IncrementalSorter"]

logger = logging.getLogger(__name__)


class IncrementalSorter:
    """Ascending bubble sort with early exit over a defensive copy.

    Parameters
    ----------
    values:
        Integers to sort.  Copied element by element; the caller's
        sequence is never aliased or mutated.
    """

    def __init__(self, values: Sequence[int]) -> None:
        self._values: list[int] = list(values)
        self._swap_count: int = 0
        self._pass_count: int = 0

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def values(self) -> tuple[int, ...]:
        """Current working state."""
        return tuple(self._values)

    @property
    def swap_count(self) -> int:
        """Swaps performed by the most recent :meth:`sort` call."""
        return self._swap_count

    @property
    def pass_count(self) -> int:
        """Passes performed by the most recent :meth:`sort` call."""
        return self._pass_count

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def sort(self, on_swap: SwapObserver | None = None) -> list[int]:
        """Sort the working copy ascending and return it as a new list.

        Parameters
        ----------
        on_swap:
            Optional observer invoked immediately after each swap with a
            tuple snapshot of the partially sorted values.
        """
        self._swap_count = 0
        self._pass_count = 0

        swapped = True
        while swapped:
            swapped = False
            self._pass_count += 1
            for index in range(len(self._values) - 1):
                if self._values[index] <= self._values[index + 1]:
                    continue

                self._swap(index, index + 1)
                swapped = True
                self._swap_count += 1
                if on_swap is not None:
                    on_swap(tuple(self._values))

        logger.debug(
            "Sorted %d values with %d swaps in %d passes",
            len(self._values),
            self._swap_count,
            self._pass_count,
        )
        return list(self._values)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _swap(self, i: int, j: int) -> None:
        self._values[i], self._values[j] = self._values[j], self._values[i]
