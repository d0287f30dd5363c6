"""
Graph module - adjacency index and the network query pipeline.

Provides:
- GraphIndex: undirected adjacency over the base graph
- ExpansionEngine: bounded breadth-first neighbor expansion
- CandidateAssembler: seeds -> expansion -> links -> isolate pruning
- RankingTruncator: global / subgraph degree ranking
- VisualEncoder: degree-to-color encoding
- NetworkBuilder: build_network entry point
"""
from .graph_index import GraphIndex, Neighbor
from .expansion import ExpansionEngine
from .candidates import CandidateAssembler, CandidateSet
from .ranking import RankingTruncator, subgraph_degrees
from .visual_encoding import VisualEncoder, node_color, FALLBACK_COLOR
from .relationships import Relationship, build_relationships
from .network_builder import NetworkBuilder

__all__ = [
    "GraphIndex",
    "Neighbor",
    "ExpansionEngine",
    "CandidateAssembler",
    "CandidateSet",
    "RankingTruncator",
    "subgraph_degrees",
    "VisualEncoder",
    "node_color",
    "FALLBACK_COLOR",
    "Relationship",
    "build_relationships",
    "NetworkBuilder",
]
