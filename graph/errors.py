"""
errors.py — Graph Exceptions
============================
Every failure the graph layer reports is a subclass of GraphError so
callers (the Flask routes, mostly) can catch the whole family at once.
"""

from typing import Optional


class GraphError(Exception):
    """Base class for graph-layer errors."""
    pass


class SourceNotFoundError(GraphError):
    """Raised when an edge-list source cannot be opened or read."""

    def __init__(self, source: str, reason: Optional[str] = None):
        self.source = source
        self.reason = reason
        msg = f"Edge list \"{source}\" was not found"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class MalformedLineError(GraphError):
    """Raised when an edge-list line is not exactly two space-separated labels."""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Line {line_number}: expected 'START END', got {line!r}"
        )


class UnknownAlgorithmError(GraphError):
    """Raised when a traversal key is not in the algorithm registry."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown algorithm '{key}'")
