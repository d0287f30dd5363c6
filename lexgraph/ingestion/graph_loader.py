"""
Graph data loader.

Validates raw node/link records once, before they reach the query engine,
and reports data-quality issues (dangling links) that the engine itself
silently ignores.
"""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Sequence

from pydantic import ValidationError

from ..core.exceptions import GraphDataError, GraphLoadError
from ..core.schemas import GraphLink, GraphNode

logger = logging.getLogger(__name__)


@dataclass
class GraphData:
    """Validated base graph."""
    nodes: list[GraphNode] = field(default_factory=list)
    links: list[GraphLink] = field(default_factory=list)
    dangling_links: list[GraphLink] = field(default_factory=list)

    @property
    def stats(self) -> dict[str, int]:
        return {
            "nodes": len(self.nodes),
            "links": len(self.links),
            "dangling_links": len(self.dangling_links),
        }


def nodes_from_records(records: Iterable[dict[str, Any]]) -> list[GraphNode]:
    """
    Validate node records.

    Raises:
        GraphDataError: on an invalid record or a duplicate id
    """
    nodes = []
    seen: set[str] = set()
    for position, record in enumerate(records):
        try:
            node = GraphNode.model_validate(record)
        except ValidationError as e:
            raise GraphDataError(f"Invalid node record at position {position}: {e}") from e
        if node.id in seen:
            raise GraphDataError(f"Duplicate node id: {node.id}")
        seen.add(node.id)
        nodes.append(node)
    return nodes


def links_from_records(records: Iterable[dict[str, Any]]) -> list[GraphLink]:
    """
    Validate link records.

    Raises:
        GraphDataError: on an invalid record
    """
    links = []
    for position, record in enumerate(records):
        try:
            links.append(GraphLink.model_validate(record))
        except ValidationError as e:
            raise GraphDataError(f"Invalid link record at position {position}: {e}") from e
    return links


def find_dangling_links(nodes: Sequence[GraphNode], links: Sequence[GraphLink]) -> list[GraphLink]:
    """Links with at least one endpoint missing from the node set."""
    node_ids = {n.id for n in nodes}
    return [
        link for link in links
        if link.source not in node_ids or link.target not in node_ids
    ]


def build_graph_data(
    node_records: Iterable[dict[str, Any]],
    link_records: Iterable[dict[str, Any]]
) -> GraphData:
    """Validate records and count dangling links."""
    nodes = nodes_from_records(node_records)
    links = links_from_records(link_records)
    dangling = find_dangling_links(nodes, links)

    if dangling:
        logger.warning(
            f"{len(dangling)} of {len(links)} links reference unknown nodes "
            f"and will be ignored by queries"
        )
    logger.info(f"Loaded graph with {len(nodes)} nodes and {len(links)} links")
    return GraphData(nodes=nodes, links=links, dangling_links=dangling)


def load_graph_json(path: str | Path) -> GraphData:
    """
    Load a graph from a JSON file of the form {"nodes": [...], "links": [...]}.

    Raises:
        GraphLoadError: if the file is missing or not valid JSON
        GraphDataError: if any record is invalid
    """
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise GraphLoadError(f"Cannot read graph file {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise GraphLoadError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(payload, dict):
        raise GraphLoadError(f"Expected a JSON object in {path}")

    return build_graph_data(payload.get("nodes") or [], payload.get("links") or [])
