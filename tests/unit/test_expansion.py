"""
Unit tests for bounded breadth-first expansion.
"""
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from lexgraph.graph.expansion import ExpansionEngine
from lexgraph.graph.graph_index import GraphIndex


@pytest.fixture
def expansion(legal_nodes, legal_links):
    return ExpansionEngine(GraphIndex(legal_nodes, legal_links))


class TestExpansionEngine:
    """Tests for ExpansionEngine.expand."""

    def test_depth_zero_returns_seeds(self, expansion):
        seeds = {"term:gift", "term:orphan"}
        assert expansion.expand(seeds, 0, 5, []) == seeds

    def test_layers(self, expansion):
        assert expansion.expand({"term:gift"}, 1) == {"term:gift", "index:title-26_section-102"}
        assert expansion.expand({"term:gift"}, 2) == {
            "term:gift", "index:title-26_section-102", "term:income", "index:title-26",
        }
        assert expansion.expand({"term:gift"}, 3) == {
            "term:gift", "index:title-26_section-102", "term:income", "index:title-26",
            "index:title-26_section-61", "index:title-26_section-1001",
        }

    def test_depth_monotonic(self, expansion):
        sizes = [len(expansion.expand({"term:gift"}, depth)) for depth in range(7)]
        assert sizes == sorted(sizes)
        # whole component of term:gift reached, then no growth
        assert sizes[-1] == sizes[-2] == 7

    def test_does_not_mutate_seeds(self, expansion):
        seeds = {"term:gift"}
        expansion.expand(seeds, 2)
        assert seeds == {"term:gift"}

    def test_neighbor_cap_is_positional(self, expansion):
        assert expansion.expand({"index:title-26"}, 1, 1) == {
            "index:title-26", "index:title-26_section-61",
        }

    def test_visited_neighbors_use_up_slots(self, expansion):
        # The index's first neighbor is already a seed, so it adds nothing
        result = expansion.expand({"index:title-26", "index:title-26_section-61"}, 1, 1)
        assert result == {"index:title-26", "index:title-26_section-61", "term:income"}

    def test_edge_type_filter(self, expansion):
        result = expansion.expand({"index:title-26"}, 2, 0, ["hierarchy"])
        assert result == {
            "index:title-26",
            "index:title-26_section-61",
            "index:title-26_section-102",
            "index:title-26_section-1001",
        }

    def test_cap_applies_after_edge_filter(self, expansion):
        result = expansion.expand({"index:title-26_section-61"}, 1, 1, ["hierarchy"])
        assert result == {"index:title-26_section-61", "index:title-26"}

    def test_isolated_and_unknown_seeds(self, expansion):
        assert expansion.expand({"term:orphan", "term:missing"}, 3) == {"term:orphan", "term:missing"}

    def test_negative_depth_is_noop(self, expansion):
        assert expansion.expand({"term:gift"}, -1) == {"term:gift"}
