"""
Pytest configuration and fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lexgraph.core.schemas import GraphLink, GraphNode, NodeProperties
from lexgraph.graph.network_builder import NetworkBuilder


@pytest.fixture
def legal_nodes():
    """A small slice of the tax code: sections, an index, entities, concepts."""
    return [
        GraphNode(
            id="index:title-26_section-61",
            name="26 U.S.C. 61",
            node_type="section",
            title="26",
            section_num="61",
            display_label="[26 U.S.C. 61]",
            properties=NodeProperties(
                text="Gross income defined",
                full_name="Gross income defined",
            ),
        ),
        GraphNode(
            id="index:title-26_section-102",
            name="26 U.S.C. 102",
            node_type="section",
            title="26",
            title_num=26,
            section_num="102",
            properties=NodeProperties(text="Gifts and inheritances"),
        ),
        GraphNode(
            id="index:title-26_section-1001",
            name="26 U.S.C. 1001",
            node_type="section",
            title_num=26,
            section_num="1001",
            text="Determination of amount of and recognition of gain or loss",
        ),
        GraphNode(
            id="index:title-26",
            name="Title 26",
            node_type="index",
            title="26",
            index_heading="Internal Revenue Code",
        ),
        GraphNode(
            id="index:title-5_section-552",
            name="5 U.S.C. 552",
            node_type="section",
            title="5",
            section_num=552,
            properties=NodeProperties(text="Public information; agency rules"),
        ),
        GraphNode(id="term:taxpayer", name="taxpayer", node_type="entity"),
        GraphNode(id="term:secretary", name="Secretary", node_type="entity"),
        GraphNode(
            id="term:income",
            name="income",
            node_type="concept",
            properties=NodeProperties(
                definition="all income from whatever source derived",
                embedding=[0.1, 0.2, 0.3],
            ),
        ),
        GraphNode(id="term:gift", name="gift", node_type="concept"),
        GraphNode(id="term:orphan", name="orphan", node_type="concept"),
    ]


@pytest.fixture
def legal_links():
    """Links among the legal nodes, plus one dangling link."""
    return [
        GraphLink(source="term:income", target="index:title-26_section-61",
                  edge_type="definition", action="defines", timestamp="2020-01-01"),
        GraphLink(source="index:title-26_section-61", target="term:taxpayer",
                  edge_type="reference", action="references", timestamp="2019-05-01"),
        GraphLink(source="index:title-26_section-102", target="term:gift",
                  edge_type="reference", action="references"),
        GraphLink(source="index:title-26_section-102", target="term:income",
                  edge_type="reference", action="references"),
        GraphLink(source="index:title-26", target="index:title-26_section-61",
                  edge_type="hierarchy", action="includes"),
        GraphLink(source="index:title-26", target="index:title-26_section-102",
                  edge_type="hierarchy", action="includes"),
        GraphLink(source="index:title-26", target="index:title-26_section-1001",
                  edge_type="hierarchy", action="includes"),
        GraphLink(source="index:title-26_section-1001", target="term:taxpayer",
                  edge_type="reference", action="references"),
        GraphLink(source="index:title-5_section-552", target="term:secretary",
                  edge_type="reference", action="references"),
        GraphLink(source="index:title-26_section-61", target="term:missing",
                  edge_type="reference", action="references"),
    ]


@pytest.fixture
def builder(legal_nodes, legal_links):
    """NetworkBuilder over the legal graph."""
    return NetworkBuilder(legal_nodes, legal_links)


@pytest.fixture
def star_builder():
    """Hub A linked to B, C, D, E (one node of each type plus an unknown type)."""
    nodes = [
        GraphNode(id="A", name="A", node_type="section"),
        GraphNode(id="B", name="B", node_type="entity"),
        GraphNode(id="C", name="C", node_type="concept"),
        GraphNode(id="D", name="D", node_type="index"),
        GraphNode(id="E", name="E", node_type="statute"),
    ]
    links = [
        GraphLink(source="A", target=leaf, edge_type="reference", action="references")
        for leaf in ("B", "C", "D", "E")
    ]
    return NetworkBuilder(nodes, links)


@pytest.fixture
def hub_builder():
    """
    Hub H has three reference links and one hierarchy link; P-Q-S is a
    hierarchy chain. Under a hierarchy-only filter H is globally the best
    connected node but locally a leaf.
    """
    nodes = [
        GraphNode(id="H", name="Hub", node_type="section"),
        GraphNode(id="R1", name="R1", node_type="entity"),
        GraphNode(id="R2", name="R2", node_type="entity"),
        GraphNode(id="R3", name="R3", node_type="entity"),
        GraphNode(id="P", name="P", node_type="index"),
        GraphNode(id="Q", name="Q", node_type="section"),
        GraphNode(id="S", name="S", node_type="section"),
    ]
    links = [
        GraphLink(source="H", target="R1", edge_type="reference"),
        GraphLink(source="H", target="R2", edge_type="reference"),
        GraphLink(source="H", target="R3", edge_type="reference"),
        GraphLink(source="H", target="P", edge_type="hierarchy"),
        GraphLink(source="P", target="Q", edge_type="hierarchy"),
        GraphLink(source="Q", target="S", edge_type="hierarchy"),
    ]
    return NetworkBuilder(nodes, links)
