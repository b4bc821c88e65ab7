"""Levenshtein edit distance between two sequences.

The calculator works on any pair of finite sequences whose elements
support ``==`` — strings (compared per code point), bytes, tuples of
tokens.  It never normalises its inputs; callers decide whether to pass
code points or bytes and must do so consistently.

Matrix layout
-------------
``matrix[i][j]`` holds the distance between ``a[:i]`` and ``b[:j]``.
Row 0 and column 0 are filled at construction (pure insertion or
deletion costs); the body is filled on the first :meth:`distance` call.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__: list[str] = ["EditDistanceCalculator", "levenshtein_distance"]


class EditDistanceCalculator:
    """Minimum number of single-element edits turning *a* into *b*.

    Example::

        EditDistanceCalculator("kitten", "sitting").distance()  # 3

    Parameters
    ----------
    a:
        Source sequence (length ``m``).
    b:
        Target sequence (length ``n``).
    """

    def __init__(self, a: Sequence[object], b: Sequence[object]) -> None:
        self._a: Sequence[object] = a
        self._b: Sequence[object] = b
        self._matrix: list[list[int]] = self._create_matrix()
        self._distance: int | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def distance(self) -> int:
        """Return the edit distance, filling the matrix on first use."""
        if self._distance is None:
            self._fill_matrix()
            self._distance = self._matrix[len(self._a)][len(self._b)]
        return self._distance

    @property
    def matrix(self) -> tuple[tuple[int, ...], ...]:
        """Read-only copy of the distance table in its current state."""
        return tuple(tuple(row) for row in self._matrix)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _create_matrix(self) -> list[list[int]]:
        rows = len(self._a) + 1
        cols = len(self._b) + 1
        matrix = [[0] * cols for _ in range(rows)]
        for i in range(rows):
            matrix[i][0] = i
        for j in range(cols):
            matrix[0][j] = j
        return matrix

    def _fill_matrix(self) -> None:
        for i in range(1, len(self._a) + 1):
            for j in range(1, len(self._b) + 1):
                self._matrix[i][j] = self._min_cost(i, j)

    def _min_cost(self, i: int, j: int) -> int:
        cost = 0 if self._a[i - 1] == self._b[j - 1] else 1
        return min(
            self._matrix[i - 1][j] + 1,         # deletion from a
            self._matrix[i][j - 1] + 1,         # insertion into a
            self._matrix[i - 1][j - 1] + cost,  # substitution or match
        )


def levenshtein_distance(a: Sequence[object], b: Sequence[object]) -> int:
    """Shortcut for ``EditDistanceCalculator(a, b).distance()``."""
    return EditDistanceCalculator(a, b).distance()
