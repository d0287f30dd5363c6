"""
Degree-based ranking used to truncate an oversized result.

Two degree sources are available:
- global: degree in the full base graph (surfaces globally important nodes)
- subgraph: degree within the filtered candidate links (keeps the shown
  view as self-connected as possible)

Ties keep the incoming node order.
"""
import logging
from typing import Iterable, Sequence

import networkx as nx

from ..core.schemas import GraphLink, RankingMode
from .graph_index import GraphIndex

logger = logging.getLogger(__name__)


def subgraph_degrees(links: Iterable[GraphLink]) -> dict[str, int]:
    """Degree of every endpoint counted over the given links only."""
    G = nx.MultiGraph()
    G.add_edges_from(link.endpoints for link in links)
    return dict(G.degree())


def top_by_degree(node_ids: Sequence[str], degrees: dict[str, int], limit: int) -> list[str]:
    """Stable descending sort by degree, cut to `limit`."""
    ranked = sorted(node_ids, key=lambda node_id: degrees.get(node_id, 0), reverse=True)
    return ranked[:max(limit, 0)]


class RankingTruncator:
    """Select the top-N nodes of a connected candidate set."""

    def __init__(self, index: GraphIndex):
        self.index = index

    def select(
        self,
        node_ids: Sequence[str],
        links: Sequence[GraphLink],
        limit: int,
        mode: RankingMode | str = RankingMode.GLOBAL
    ) -> list[str]:
        """
        Rank candidates by degree and keep the first `limit`.

        Args:
            node_ids: Connected candidate ids, in base-graph order
            links: Retained candidate links (used by subgraph mode)
            limit: Maximum number of nodes to keep
            mode: global or subgraph degree

        Returns:
            Selected node ids, highest degree first
        """
        mode = RankingMode.coerce(mode)
        if mode == RankingMode.SUBGRAPH:
            degrees = subgraph_degrees(links)
        else:
            degrees = {node_id: self.index.degree(node_id) for node_id in node_ids}

        selected = top_by_degree(node_ids, degrees, limit)
        logger.debug(f"Selected top {len(selected)} of {len(node_ids)} nodes by {mode.value} degree")
        return selected
