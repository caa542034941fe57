"""CosaCode — heuristic static analysis for Python snippets."""

__version__ = "0.1.0"
