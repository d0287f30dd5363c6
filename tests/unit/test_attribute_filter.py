"""
Unit tests for the attribute filter.
"""
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from lexgraph.core.schemas import GraphNode
from lexgraph.search.attribute_filter import AttributeFilter, parse_leading_int


@pytest.fixture
def attribute_filter(legal_nodes):
    return AttributeFilter(legal_nodes)


class TestAttributeFilter:
    """Tests for AttributeFilter policy."""

    def test_type_filter_only(self, attribute_filter):
        result = attribute_filter.filter(["entity"], [], [])
        assert result == {"term:taxpayer", "term:secretary"}

    def test_type_filter_ignores_titles_and_sections(self, attribute_filter):
        result = attribute_filter.filter(["entity"], [5], ["552"])
        assert result == {"term:taxpayer", "term:secretary"}

    def test_no_filters_match_everything(self, attribute_filter, legal_nodes):
        assert attribute_filter.filter([], [], []) == {n.id for n in legal_nodes}

    def test_title_from_number_or_string(self, attribute_filter):
        result = attribute_filter.filter([], [26], [])
        assert result == {
            "index:title-26_section-61",      # title "26"
            "index:title-26_section-102",     # title_num and title
            "index:title-26_section-1001",    # title_num only
            "index:title-26",                 # index node
        }

    def test_section_substring_case_insensitive(self, attribute_filter):
        assert attribute_filter.filter([], [], ["55"]) == {"index:title-5_section-552"}

    def test_title_or_section(self, attribute_filter):
        result = attribute_filter.filter([], [5], ["1001"])
        assert result == {"index:title-5_section-552", "index:title-26_section-1001"}

    def test_title_only_applies_to_sections_and_indexes(self):
        nodes = [
            GraphNode(id="c", node_type="concept", title="26", title_num=26),
            GraphNode(id="s", node_type="section", title="26 U.S.C."),
        ]
        assert AttributeFilter(nodes).filter([], [26], []) == {"s"}

    def test_section_requires_section_num(self):
        nodes = [
            GraphNode(id="a", node_type="section", section_num="61A"),
            GraphNode(id="b", node_type="section"),
        ]
        assert AttributeFilter(nodes).filter([], [], ["61a"]) == {"a"}


def test_parse_leading_int():
    assert parse_leading_int("26") == 26
    assert parse_leading_int(" 26A") == 26
    assert parse_leading_int("Title 26") is None
    assert parse_leading_int(None) is None
    assert parse_leading_int(5) == 5
