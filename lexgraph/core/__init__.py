"""
Core module - Configuration, schemas, and exceptions.
"""
from .config import Settings, get_settings
from .exceptions import LexGraphError, GraphDataError, GraphLoadError
from .schemas import (
    NodeType,
    EdgeType,
    SearchLogic,
    RankingMode,
    NodeProperties,
    GraphNode,
    GraphLink,
    FilterState,
    NodeView,
    FilteredGraph,
)

__all__ = [
    "Settings",
    "get_settings",
    "LexGraphError",
    "GraphDataError",
    "GraphLoadError",
    "NodeType",
    "EdgeType",
    "SearchLogic",
    "RankingMode",
    "NodeProperties",
    "GraphNode",
    "GraphLink",
    "FilterState",
    "NodeView",
    "FilteredGraph",
]
