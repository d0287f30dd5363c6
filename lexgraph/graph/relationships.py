"""
Relationship listing for a selected node.

Turns the links touching a node into actor/action/target records for a
details panel, optionally narrowed to a second node.
"""
import logging
from dataclasses import dataclass
from typing import Sequence

from ..core.schemas import GraphLink
from .graph_index import GraphIndex

logger = logging.getLogger(__name__)


@dataclass
class Relationship:
    """One link rendered as actor -> action -> target."""
    id: int
    actor: str
    action: str
    target: str
    actor_id: str
    target_id: str
    actor_type: str | None = None
    target_type: str | None = None
    edge_type: str | None = None
    timestamp: str | None = None
    location: str | None = None
    definition: str | None = None

    def involves(self, node_id: str) -> bool:
        return node_id in (self.actor_id, self.target_id)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "actor": self.actor,
            "action": self.action,
            "target": self.target,
            "actor_id": self.actor_id,
            "target_id": self.target_id,
            "actor_type": self.actor_type,
            "target_type": self.target_type,
            "edge_type": self.edge_type,
            "timestamp": self.timestamp,
            "location": self.location,
            "definition": self.definition,
        }


def _timestamp_key(rel: Relationship) -> tuple[int, str]:
    return (0, rel.timestamp) if rel.timestamp else (1, "")


def build_relationships(
    index: GraphIndex,
    links: Sequence[GraphLink],
    node_id: str,
    counterpart: str | None = None
) -> list[Relationship]:
    """
    Relationships of `node_id` among `links`.

    Args:
        index: Graph index used to label endpoints
        links: Links to consider
        node_id: Selected node
        counterpart: If given, keep only relationships also touching it

    Returns:
        Relationships sorted by timestamp, missing timestamps last
    """
    relationships = []
    for position, link in enumerate(links):
        if node_id not in link.endpoints:
            continue
        actor = index.node(link.source)
        target = index.node(link.target)
        if actor is None or target is None:
            continue
        relationships.append(Relationship(
            id=position,
            actor=actor.name or actor.id,
            action=link.action,
            target=target.name or target.id,
            actor_id=actor.id,
            target_id=target.id,
            actor_type=actor.node_type,
            target_type=target.node_type,
            edge_type=link.edge_type,
            timestamp=link.timestamp,
            location=link.location,
            definition=link.definition,
        ))

    if counterpart is not None:
        relationships = [r for r in relationships if r.involves(counterpart)]

    relationships.sort(key=_timestamp_key)
    logger.debug(f"{len(relationships)} relationships for {node_id}")
    return relationships
