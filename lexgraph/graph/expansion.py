"""
Bounded breadth-first expansion from seed nodes.
"""
import logging
from typing import Iterable, Sequence

from .graph_index import GraphIndex

logger = logging.getLogger(__name__)


class ExpansionEngine:
    """Expand a seed set outward through the adjacency index."""

    def __init__(self, index: GraphIndex):
        self.index = index

    def expand(
        self,
        seeds: Iterable[str],
        depth: int,
        max_neighbors_per_node: int = 0,
        allowed_edge_types: Sequence[str] = ()
    ) -> set[str]:
        """
        Expand from seed nodes by `depth` hops.

        For every frontier node, its neighbor list is filtered by edge type
        and then cut to the first `max_neighbors_per_node` entries (0 means
        no cap). The cut is positional over the filtered list, so neighbors
        that were already visited still use up a slot.

        Args:
            seeds: Starting node ids
            depth: Number of breadth-first layers
            max_neighbors_per_node: Neighbor slots per frontier node
            allowed_edge_types: Edge types to follow (empty = all)

        Returns:
            Seed ids plus every node reached
        """
        expanded = set(seeds)
        seed_count = len(expanded)
        frontier = set(expanded)
        allowed = set(allowed_edge_types)

        for _ in range(max(depth, 0)):
            next_layer: set[str] = set()

            for node_id in frontier:
                neighbors = self.index.neighbors(node_id)
                if allowed:
                    neighbors = [n for n in neighbors if n.edge_type in allowed]
                if max_neighbors_per_node > 0:
                    neighbors = neighbors[:max_neighbors_per_node]

                for neighbor in neighbors:
                    if neighbor.node_id not in expanded:
                        expanded.add(neighbor.node_id)
                        next_layer.add(neighbor.node_id)

            frontier = next_layer
            if not frontier:
                break

        logger.debug(f"Expansion from {seed_count} seeds resulted in {len(expanded)} nodes")
        return expanded
