"""Core layer — pure algorithms and session state.

Rules
-----
* No ``print()`` calls.
* No terminal, filesystem or network I/O.
* No imports from ``cli``.
"""

from integer_collector.core.collector import CollectorSession
from integer_collector.core.levenshtein import EditDistanceCalculator, levenshtein_distance
from integer_collector.core.models import CollectorSettings, InputKind, InputOutcome
from integer_collector.core.protocols import SwapObserver
from integer_collector.core.sorter import IncrementalSorter

__all__: list[str] = [
    "CollectorSession",
    "CollectorSettings",
    "EditDistanceCalculator",
    "IncrementalSorter",
    "InputKind",
    "InputOutcome",
    "SwapObserver",
    "levenshtein_distance",
]
