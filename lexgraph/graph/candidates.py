"""
Candidate assembly for a network query.

Pipeline:
1. Seed selection (keyword search, or every node when no search is given)
2. Expansion from seeds (only after a search, when depth > 0)
3. Type filter applied to seed nodes only; expansion-only nodes are kept
4. Link selection by edge type between candidates
5. Isolate pruning
"""
import logging
import time
from dataclasses import dataclass, field

from ..core.schemas import FilterState, GraphLink, SearchLogic
from ..search.attribute_filter import AttributeFilter
from ..search.keyword_search import KeywordSearch
from .expansion import ExpansionEngine
from .graph_index import GraphIndex

logger = logging.getLogger(__name__)


@dataclass
class CandidateSet:
    """Intermediate result of candidate assembly."""
    searched: bool = False
    seed_ids: set[str] = field(default_factory=set)
    candidate_ids: set[str] = field(default_factory=set)
    links: list[GraphLink] = field(default_factory=list)
    connected_ids: list[str] = field(default_factory=list)  # base-graph order

    @property
    def is_empty(self) -> bool:
        return not self.connected_ids


class CandidateAssembler:
    """Turn a filter state into the connected candidate set."""

    def __init__(
        self,
        index: GraphIndex,
        keyword_search: KeywordSearch,
        attribute_filter: AttributeFilter,
        expansion: ExpansionEngine
    ):
        self.index = index
        self.keyword_search = keyword_search
        self.attribute_filter = attribute_filter
        self.expansion = expansion

    def assemble(
        self,
        state: FilterState,
        search_logic: SearchLogic | str = SearchLogic.OR
    ) -> CandidateSet:
        """
        Run seed selection through isolate pruning.

        Returns:
            CandidateSet; `connected_ids` is empty when the search matched nothing
        """
        result = CandidateSet(searched=state.has_search)

        # Step 1: seeds
        start = time.perf_counter()
        if result.searched:
            result.seed_ids = self.keyword_search.search(
                state.search_terms, state.search_fields, search_logic
            )
            logger.debug(
                f"Search found {len(result.seed_ids)} seed nodes "
                f"in {(time.perf_counter() - start) * 1000:.2f}ms"
            )
            if not result.seed_ids:
                logger.info("No nodes matched the search terms")
                return result
        else:
            result.seed_ids = set(self.index.node_ids())

        # Step 2: expansion
        if result.searched and state.expansion_depth > 0:
            start = time.perf_counter()
            candidates = self.expansion.expand(
                result.seed_ids,
                state.expansion_depth,
                state.max_nodes_per_expansion,
                state.allowed_edge_types,
            )
            logger.debug(
                f"Expanded {state.expansion_depth} hop(s) to {len(candidates)} nodes "
                f"in {(time.perf_counter() - start) * 1000:.2f}ms"
            )
        else:
            candidates = set(result.seed_ids)

        # Step 3: type filter on seeds only
        if result.searched and state.allowed_node_types:
            typed = self.attribute_filter.filter(state.allowed_node_types, [], [])
            kept_seeds = result.seed_ids & typed
            candidates = {
                node_id for node_id in candidates
                if node_id in kept_seeds or node_id not in result.seed_ids
            }
            logger.debug(
                f"Seed nodes after type filter: {len(result.seed_ids)} -> {len(kept_seeds)}"
            )
        result.candidate_ids = candidates

        # Step 4: links between candidates
        allowed_edges = set(state.allowed_edge_types)
        result.links = [
            link for link in self.index.links
            if (not allowed_edges or link.edge_type in allowed_edges)
            and link.source in candidates
            and link.target in candidates
        ]

        # Step 5: isolate pruning
        linked: set[str] = set()
        for link in result.links:
            linked.add(link.source)
            linked.add(link.target)
        result.connected_ids = [
            node_id for node_id in self.index.node_ids() if node_id in linked
        ]

        logger.debug(
            f"{len(candidates)} candidates, {len(result.links)} links, "
            f"{len(result.connected_ids)} connected "
            f"({len(candidates) - len(result.connected_ids)} isolates removed)"
        )
        return result
