"""
Undirected adjacency index over the base graph.

Each link is registered on both endpoints, in link order, as a
(neighbor id, edge type) pair. Links whose endpoints are not both known
nodes are left out of the index. A networkx MultiGraph mirrors the same
links for degree queries.
"""
import logging
import time
from typing import NamedTuple, Sequence

import networkx as nx

from ..core.schemas import GraphLink, GraphNode

logger = logging.getLogger(__name__)


class Neighbor(NamedTuple):
    """One adjacency entry."""
    node_id: str
    edge_type: str


class GraphIndex:
    """
    Read-only adjacency structure built once from the node and link lists.

    Build cost is O(V + E); neighbor lookup is a dict access.
    """

    def __init__(self, nodes: Sequence[GraphNode], links: Sequence[GraphLink]):
        start = time.perf_counter()

        self._nodes: dict[str, GraphNode] = {n.id: n for n in nodes}
        adjacency: dict[str, list[Neighbor]] = {}
        valid_links: list[GraphLink] = []

        self.graph = nx.MultiGraph()
        self.graph.add_nodes_from(self._nodes)

        for link in links:
            source, target = link.source, link.target
            if source not in self._nodes or target not in self._nodes:
                continue
            valid_links.append(link)
            adjacency.setdefault(source, []).append(Neighbor(target, link.edge_type))
            adjacency.setdefault(target, []).append(Neighbor(source, link.edge_type))
            self.graph.add_edge(source, target, edge_type=link.edge_type)

        self._adjacency: dict[str, tuple[Neighbor, ...]] = {
            node_id: tuple(entries) for node_id, entries in adjacency.items()
        }
        self._links: tuple[GraphLink, ...] = tuple(valid_links)

        logger.debug(
            f"Adjacency index built in {(time.perf_counter() - start) * 1000:.2f}ms "
            f"({len(self._nodes)} nodes, {len(self._links)} links)"
        )

    # --------------------------------------------------------
    # Lookups
    # --------------------------------------------------------

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def links(self) -> tuple[GraphLink, ...]:
        """Links whose endpoints both exist, in input order."""
        return self._links

    def node(self, node_id: str) -> GraphNode | None:
        return self._nodes.get(node_id)

    def node_ids(self) -> list[str]:
        return list(self._nodes)

    def neighbors(self, node_id: str) -> tuple[Neighbor, ...]:
        """Ordered neighbor entries of a node (empty for unknown ids)."""
        return self._adjacency.get(node_id, ())

    def degree(self, node_id: str) -> int:
        """Degree in the full base graph; 0 for unknown ids."""
        if node_id not in self._nodes:
            return 0
        return self.graph.degree(node_id)
