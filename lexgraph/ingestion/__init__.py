"""
Ingestion module - validation and loading of graph data.
"""
from .graph_loader import (
    GraphData,
    nodes_from_records,
    links_from_records,
    find_dangling_links,
    build_graph_data,
    load_graph_json,
)

__all__ = [
    "GraphData",
    "nodes_from_records",
    "links_from_records",
    "find_dangling_links",
    "build_graph_data",
    "load_graph_json",
]
