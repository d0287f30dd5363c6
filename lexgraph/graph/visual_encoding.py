"""
Degree-to-color encoding for the nodes of a filtered view.

Each node type has a low/high RGB anchor pair; a node's color is the linear
interpolation at t = degree / max degree in the view.
"""
import logging
import math
from typing import Sequence

from ..core.schemas import GraphLink, GraphNode, NodeType, NodeView
from .ranking import subgraph_degrees

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]


# ── Color Palette ───────────────────────────────────────────────

SECTION_SCALE: tuple[RGB, RGB] = ((0x9B, 0x96, 0xC9), (0x41, 0x37, 0x8F))
ENTITY_SCALE: tuple[RGB, RGB] = ((0xF9, 0xD9, 0x9B), (0xF0, 0xA7, 0x34))
CONCEPT_SCALE: tuple[RGB, RGB] = ((0xE8, 0xB3, 0xE3), (0x9C, 0x33, 0x91))

COLOR_SCALES: dict[str, tuple[RGB, RGB]] = {
    NodeType.SECTION.value: SECTION_SCALE,
    NodeType.INDEX.value: SECTION_SCALE,
    NodeType.ENTITY.value: ENTITY_SCALE,
    NodeType.CONCEPT.value: CONCEPT_SCALE,
}

FALLBACK_COLOR = "#AFBBE8"  # steel


def interpolate_rgb(low: RGB, high: RGB, t: float) -> RGB:
    """Linear interpolation between two RGB triples, rounded per channel."""
    return tuple(_round_half_up(a + (b - a) * t) for a, b in zip(low, high))


def _round_half_up(value: float) -> int:
    # halves round up, never to even
    return math.floor(value + 0.5)


def format_rgb(rgb: RGB) -> str:
    return f"rgb({rgb[0]}, {rgb[1]}, {rgb[2]})"


def node_color(node_type: str, t: float) -> str:
    """Color for a node type at strength t in [0, 1]."""
    scale = COLOR_SCALES.get(node_type)
    if scale is None:
        return FALLBACK_COLOR
    return format_rgb(interpolate_rgb(scale[0], scale[1], t))


class VisualEncoder:
    """Build per-query NodeView records with size and color."""

    def encode(self, nodes: Sequence[GraphNode], links: Sequence[GraphLink]) -> list[NodeView]:
        """
        Compute degree-based size and color for each node.

        Args:
            nodes: Final node set
            links: Final links among those nodes

        Returns:
            One fresh NodeView per node, in the given order
        """
        degrees = subgraph_degrees(links)
        vals = {node.id: degrees.get(node.id, 0) or 1 for node in nodes}
        max_val = max(max(vals.values(), default=1), 1)

        views = []
        for node in nodes:
            val = vals[node.id]
            color = node_color(node.node_type, val / max_val)
            views.append(NodeView(
                id=node.id,
                name=node.name,
                node_type=node.node_type,
                val=val,
                total_val=val,
                color=color,
                base_color=color,
            ))

        logger.debug(f"Encoded {len(views)} nodes (max degree {max_val})")
        return views
