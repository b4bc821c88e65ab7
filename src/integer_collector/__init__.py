"""integer-collector — collect integers interactively, then watch them sort.

Built around two pure engines: a Levenshtein edit-distance calculator and
an incremental bubble sorter that reports every swap.
"""

from integer_collector.version import __version__

__all__: list[str] = ["__version__"]
