"""
Per-field value resolution for keyword search.

Each search field maps to an ordered chain of resolvers over a node. The
first resolver yielding a non-empty value wins. The `properties` field is
special: it contributes every string value in the node's property bag.
Unknown fields fall back to a generic attribute lookup on the node.
"""
from typing import Any, Callable

from ..core.schemas import GraphNode, NodeType

Resolver = Callable[[GraphNode], Any]

PROPERTIES_FIELD = "properties"


def _prop(key: str) -> Resolver:
    def resolve(node: GraphNode) -> Any:
        return node.properties.get(key) if node.properties else None
    return resolve


def _attr(key: str) -> Resolver:
    def resolve(node: GraphNode) -> Any:
        return node.attribute(key)
    return resolve


def _name_if(node_type: NodeType) -> Resolver:
    def resolve(node: GraphNode) -> Any:
        return node.name if node.node_type == node_type else None
    return resolve


FIELD_RESOLVERS: dict[str, tuple[Resolver, ...]] = {
    "text": (_prop("text"), _attr("text"), _attr("section_text"), _attr("index_heading")),
    "full_name": (_prop("full_name"), _attr("full_name")),
    "display_label": (_attr("display_label"),),
    "definition": (_prop("definition"),),
    "entity": (_name_if(NodeType.ENTITY),),
    "concept": (_name_if(NodeType.CONCEPT),),
    # Legacy aliases
    "section_text": (_attr("section_text"), _prop("text"), _attr("text")),
    "section_heading": (_attr("section_heading"),),
    "section_num": (_attr("section_num"),),
    "tag": (_name_if(NodeType.CONCEPT),),
}


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def resolve_field(node: GraphNode, field: str) -> Any:
    """Resolve one non-properties field to a single value (or None)."""
    chain = FIELD_RESOLVERS.get(field)
    if chain is None:
        return node.attribute(field)
    for resolver in chain:
        value = resolver(node)
        if not _is_empty(value):
            return value
    return None


def searchable_values(node: GraphNode, fields) -> list[str]:
    """Lower-cased searchable strings for a node across the given fields."""
    values: list[str] = []
    for field in fields:
        if field == PROPERTIES_FIELD:
            if node.properties is not None:
                values.extend(v.lower() for v in node.properties.string_values())
            continue
        value = resolve_field(node, field)
        if value is not None:
            values.append(_as_text(value).lower())
    return values
