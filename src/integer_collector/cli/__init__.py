"""CLI layer — argument parsing, the interactive loop, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, but ``core`` must never import from ``cli``.
"""
