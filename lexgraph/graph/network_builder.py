"""
Network builder - the query entry point.

Composes keyword search, attribute filtering, expansion, isolate pruning,
degree ranking and visual encoding into one pipeline per query. The base
graph is fixed at construction; every query returns freshly allocated
output and never modifies the base records.
"""
import logging
import time
from collections import Counter
from typing import Any, Sequence

from ..core.exceptions import GraphDataError
from ..core.schemas import (
    FilteredGraph,
    FilterState,
    GraphLink,
    GraphNode,
    RankingMode,
    SearchLogic,
)
from ..search.attribute_filter import AttributeFilter
from ..search.keyword_search import KeywordSearch
from .candidates import CandidateAssembler
from .expansion import ExpansionEngine
from .graph_index import GraphIndex
from .ranking import RankingTruncator
from .relationships import Relationship, build_relationships
from .visual_encoding import VisualEncoder

logger = logging.getLogger(__name__)


class NetworkBuilder:
    """
    Filters a static legal graph down to a bounded, colored subgraph.

    Usage:
        builder = NetworkBuilder(nodes, links)
        result = builder.build_network(FilterState(search_terms=["income"],
                                                   search_fields=["text"]))
    """

    def __init__(self, nodes: Sequence[GraphNode], links: Sequence[GraphLink]):
        """
        Build the adjacency index over the base graph.

        Args:
            nodes: Base nodes (ids must be unique)
            links: Base links; links with unknown endpoints are ignored

        Raises:
            GraphDataError: if two nodes share an id
        """
        duplicates = [node_id for node_id, n in Counter(n.id for n in nodes).items() if n > 1]
        if duplicates:
            raise GraphDataError(f"Duplicate node ids: {sorted(duplicates)[:10]}")

        self.nodes: tuple[GraphNode, ...] = tuple(nodes)
        self.index = GraphIndex(self.nodes, links)

        self.keyword_search = KeywordSearch(self.nodes)
        self.attribute_filter = AttributeFilter(self.nodes)
        self.expansion = ExpansionEngine(self.index)
        self.assembler = CandidateAssembler(
            self.index, self.keyword_search, self.attribute_filter, self.expansion
        )
        self.ranking = RankingTruncator(self.index)
        self.encoder = VisualEncoder()

        logger.info(
            f"NetworkBuilder initialized ({len(self.nodes)} nodes, "
            f"{len(self.index.links)} links)"
        )

    @property
    def links(self) -> tuple[GraphLink, ...]:
        return self.index.links

    # --------------------------------------------------------
    # Component operations
    # --------------------------------------------------------

    def search_nodes(
        self,
        search_terms: Sequence[str],
        search_fields: Sequence[str],
        logic: SearchLogic | str = SearchLogic.OR
    ) -> set[str]:
        """Multi-field keyword search; see KeywordSearch.search."""
        return self.keyword_search.search(search_terms, search_fields, logic)

    def filter_by_attributes(
        self,
        allowed_node_types: Sequence[str],
        allowed_titles: Sequence[int],
        allowed_sections: Sequence[str]
    ) -> set[str]:
        """Type/title/section filter; see AttributeFilter.filter."""
        return self.attribute_filter.filter(allowed_node_types, allowed_titles, allowed_sections)

    def expand_from_seeds(
        self,
        seed_ids: Sequence[str] | set[str],
        depth: int,
        max_neighbors_per_node: int = 0,
        allowed_edge_types: Sequence[str] = ()
    ) -> set[str]:
        """Bounded breadth-first expansion; see ExpansionEngine.expand."""
        return self.expansion.expand(seed_ids, depth, max_neighbors_per_node, allowed_edge_types)

    # --------------------------------------------------------
    # Query
    # --------------------------------------------------------

    def build_network(
        self,
        state: FilterState | dict[str, Any],
        search_logic: SearchLogic | str = SearchLogic.OR,
        ranking_mode: RankingMode | str = RankingMode.GLOBAL
    ) -> FilteredGraph:
        """
        Build the filtered, ranked and colored network for one query.

        Args:
            state: Filter state (or a dict of its fields)
            search_logic: AND or OR
            ranking_mode: global or subgraph degree ranking

        Returns:
            FilteredGraph with `matched_count` = connected candidates before truncation
        """
        start = time.perf_counter()
        if not isinstance(state, FilterState):
            state = FilterState.model_validate(state)
        search_logic = SearchLogic.coerce(search_logic)
        ranking_mode = RankingMode.coerce(ranking_mode)

        candidates = self.assembler.assemble(state, search_logic)
        if candidates.is_empty:
            return FilteredGraph.empty()

        # Cap connected nodes
        matched_count = len(candidates.connected_ids)
        truncated = matched_count > state.max_total_nodes

        if truncated:
            final_ids = set(self.ranking.select(
                candidates.connected_ids,
                candidates.links,
                state.max_total_nodes,
                ranking_mode,
            ))
        else:
            final_ids = set(candidates.connected_ids)

        nodes = [self.index.node(node_id) for node_id in candidates.connected_ids if node_id in final_ids]
        links = [
            link for link in candidates.links
            if link.source in final_ids and link.target in final_ids
        ]
        views = self.encoder.encode(nodes, links)

        logger.info(
            f"Built network: {len(views)} nodes, {len(links)} links "
            f"(matched {matched_count}, truncated: {truncated}, "
            f"{search_logic.value}/{ranking_mode.value}) "
            f"in {(time.perf_counter() - start) * 1000:.2f}ms"
        )
        return FilteredGraph(
            nodes=views,
            links=links,
            truncated=truncated,
            matched_count=matched_count,
        )

    # --------------------------------------------------------
    # Relationships
    # --------------------------------------------------------

    def relationships_for(
        self,
        node_id: str,
        counterpart: str | None = None,
        graph: FilteredGraph | None = None
    ) -> list[Relationship]:
        """
        List the relationships of a node, sorted by timestamp.

        Args:
            node_id: Selected node
            counterpart: Only keep relationships with this second node
            graph: Restrict to the links of a query result

        Returns:
            Relationship records, missing timestamps last
        """
        links = graph.links if graph is not None else self.index.links
        return build_relationships(self.index, links, node_id, counterpart)
