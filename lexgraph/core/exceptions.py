"""
Exception hierarchy for LexGraph.

Queries never raise for data reasons; these are raised while graph data is
being validated and loaded.
"""


class LexGraphError(Exception):
    """Base class for LexGraph errors."""


class GraphDataError(LexGraphError, ValueError):
    """Node or link records failed validation (bad fields, duplicate ids)."""


class GraphLoadError(LexGraphError):
    """A graph data file could not be read or parsed."""
