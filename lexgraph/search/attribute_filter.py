"""
Attribute predicates over node type, title number and section number.

Policy:
- A non-empty type list is the only criterion (titles/sections ignored).
- With no types and no titles/sections, everything matches.
- Otherwise a node matches the title predicate OR the section predicate.
"""
import logging
import re
from typing import Any, Sequence

from ..core.schemas import GraphNode, NodeType

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

TITLED_NODE_TYPES = {NodeType.SECTION.value, NodeType.INDEX.value}


def parse_leading_int(value: Any) -> int | None:
    """Parse the integer prefix of a value ('26' -> 26, '26A' -> 26)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def matches_title(node: GraphNode, titles: Sequence[int]) -> bool:
    if node.node_type not in TITLED_NODE_TYPES:
        return False
    if node.title_num and node.title_num in titles:
        return True
    title = parse_leading_int(node.title)
    return title is not None and title in titles


def matches_section(node: GraphNode, sections: Sequence[str]) -> bool:
    if _is_absent(node.section_num):
        return False
    section_num = str(node.section_num).lower()
    return any(str(s).lower() in section_num for s in sections)


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


class AttributeFilter:
    """Type/title/section matcher over a fixed node list."""

    def __init__(self, nodes: Sequence[GraphNode]):
        self.nodes = nodes

    def filter(
        self,
        node_types: Sequence[str],
        titles: Sequence[int],
        sections: Sequence[str]
    ) -> set[str]:
        """Return ids of nodes passing the attribute policy."""
        if node_types:
            allowed = set(node_types)
            matched = {n.id for n in self.nodes if n.node_type in allowed}
        elif not titles and not sections:
            matched = {n.id for n in self.nodes}
        else:
            matched = {
                n.id for n in self.nodes
                if (titles and matches_title(n, titles))
                or (sections and matches_section(n, sections))
            }

        logger.debug(f"Attribute filter matched {len(matched)} nodes")
        return matched
