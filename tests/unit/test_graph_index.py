"""
Unit tests for the adjacency index.
"""
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from lexgraph.core.schemas import GraphLink, GraphNode
from lexgraph.graph.graph_index import GraphIndex, Neighbor


@pytest.fixture
def index(legal_nodes, legal_links):
    return GraphIndex(legal_nodes, legal_links)


class TestGraphIndex:
    """Tests for GraphIndex."""

    def test_links_are_registered_on_both_endpoints(self, index):
        """Each link appears in both endpoints' neighbor lists, in link order."""
        assert index.neighbors("index:title-26_section-61") == (
            Neighbor("term:income", "definition"),
            Neighbor("term:taxpayer", "reference"),
            Neighbor("index:title-26", "hierarchy"),
        )
        assert index.neighbors("index:title-26") == (
            Neighbor("index:title-26_section-61", "hierarchy"),
            Neighbor("index:title-26_section-102", "hierarchy"),
            Neighbor("index:title-26_section-1001", "hierarchy"),
        )

    def test_dangling_links_are_dropped(self, index, legal_links):
        """Links to unknown nodes never reach the index."""
        assert len(index.links) == len(legal_links) - 1
        assert "term:missing" not in index
        assert index.neighbors("term:missing") == ()
        for link in index.links:
            assert link.source in index and link.target in index

    def test_every_indexed_id_is_a_node(self, index, legal_nodes):
        node_ids = {n.id for n in legal_nodes}
        assert set(index.node_ids()) == node_ids
        for node_id in index.node_ids():
            for neighbor in index.neighbors(node_id):
                assert neighbor.node_id in node_ids

    def test_global_degree(self, index):
        assert index.degree("index:title-26_section-61") == 3
        assert index.degree("index:title-26_section-1001") == 2
        assert index.degree("term:orphan") == 0
        assert index.degree("term:missing") == 0

    def test_isolated_node_has_no_neighbors(self, index):
        assert index.neighbors("term:orphan") == ()
        assert "term:orphan" in index

    def test_self_loop_counts_twice(self):
        nodes = [GraphNode(id="a", node_type="section")]
        links = [GraphLink(source="a", target="a", edge_type="reference")]
        index = GraphIndex(nodes, links)

        assert len(index.neighbors("a")) == 2
        assert index.degree("a") == 2

    def test_parallel_links_are_kept(self):
        nodes = [GraphNode(id="a", node_type="section"), GraphNode(id="b", node_type="entity")]
        links = [
            GraphLink(source="a", target="b", edge_type="reference"),
            GraphLink(source="b", target="a", edge_type="definition"),
        ]
        index = GraphIndex(nodes, links)

        assert index.neighbors("a") == (Neighbor("b", "reference"), Neighbor("b", "definition"))
        assert index.degree("b") == 2
