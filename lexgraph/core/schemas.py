"""
Pydantic schemas for the legal knowledge graph.

Base graph records (GraphNode, GraphLink) are frozen once validated.
Query results are built from fresh per-query records (NodeView) that
reference base nodes by id instead of annotating them.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================
# Categorical Tags
# ============================================================

class NodeType(str, Enum):
    """Kinds of node in the legal graph."""
    SECTION = "section"
    ENTITY = "entity"
    CONCEPT = "concept"
    INDEX = "index"


class EdgeType(str, Enum):
    """Kinds of relation between nodes."""
    DEFINITION = "definition"   # term is defined by a section
    REFERENCE = "reference"     # section references a term/section
    HIERARCHY = "hierarchy"     # index includes a section


class SearchLogic(str, Enum):
    """How multiple search terms combine."""
    AND = "AND"
    OR = "OR"

    @classmethod
    def coerce(cls, value: "SearchLogic | str") -> "SearchLogic":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().upper())


class RankingMode(str, Enum):
    """Degree source used when the result has to be truncated."""
    GLOBAL = "global"       # degree in the full base graph
    SUBGRAPH = "subgraph"   # degree in the filtered candidate links

    @classmethod
    def coerce(cls, value: "RankingMode | str") -> "RankingMode":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


# ============================================================
# Base Graph Records
# ============================================================

class NodeProperties(BaseModel):
    """Structured property bag attached to a node.

    Known keys are typed; anything else is kept as an extension entry.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    full_name: str | None = Field(None, description="Full name of the statute")
    text: str | None = Field(None, description="Section text content")
    definition: str | None = Field(None, description="Definition for defined terms")
    embedding: list[float] | None = None
    full_name_embedding: list[float] | None = None

    def items(self) -> Iterator[tuple[str, Any]]:
        """Known keys first, then extension entries, skipping unset values."""
        for key in type(self).model_fields:
            value = getattr(self, key)
            if value is not None:
                yield key, value
        for key, value in (self.model_extra or {}).items():
            if value is not None:
                yield key, value

    def get(self, key: str, default: Any = None) -> Any:
        if key in type(self).model_fields:
            value = getattr(self, key)
        else:
            value = (self.model_extra or {}).get(key)
        return default if value is None else value

    def string_values(self) -> list[str]:
        """Every string value in the bag."""
        return [value for _, value in self.items() if isinstance(value, str)]


class GraphNode(BaseModel):
    """A node of the base graph.

    Top-level legacy fields mirror older data exports and are kept for
    backward compatibility; lookups prefer `properties` where both exist.
    """
    model_config = ConfigDict(extra="allow", frozen=True, coerce_numbers_to_str=True)

    id: str = Field(..., description="Unique id, e.g. 'term:income'")
    name: str = Field(default="", description="Human-readable label")
    node_type: str = Field(..., description="section, entity, concept or index")
    properties: NodeProperties | None = None

    # Index/section metadata
    title: str | None = None
    part: str | None = None
    chapter: str | None = None
    subchapter: str | None = None
    section: str | None = None
    display_label: str | None = Field(None, description="e.g. '[26 U.S.C. 61]'")

    # Legacy / compatibility
    full_name: str | None = None
    text: str | None = None
    section_num: str | int | None = None
    section_heading: str | None = None
    section_text: str | None = None
    title_num: int | None = None
    entity: str | None = None
    tag: str | None = None
    term_type: str | None = None
    index_type: str | None = None

    @field_validator("node_type", mode="before")
    @classmethod
    def _normalize_node_type(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value

    def attribute(self, key: str) -> Any:
        """Look up a field or extra attribute by name; None when absent."""
        if key in type(self).model_fields:
            return getattr(self, key)
        return (self.model_extra or {}).get(key)


class GraphLink(BaseModel):
    """A relation between two nodes, stored with its original direction."""
    model_config = ConfigDict(extra="allow", frozen=True, coerce_numbers_to_str=True)

    source: str
    target: str
    edge_type: str = Field(..., description="definition, reference or hierarchy")
    action: str = Field(default="", description="e.g. 'defines', 'references', 'includes'")

    definition: str | None = None
    location: str | None = None
    timestamp: str | None = None
    weight: float | None = None
    count: int | None = None

    @field_validator("source", "target", mode="before")
    @classmethod
    def _endpoint_id(cls, value: Any) -> Any:
        # Front-end exports may embed the node object instead of its id
        if isinstance(value, dict):
            return value.get("id")
        if isinstance(value, GraphNode):
            return value.id
        return value

    @field_validator("edge_type", mode="before")
    @classmethod
    def _normalize_edge_type(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value

    @property
    def endpoints(self) -> tuple[str, str]:
        return self.source, self.target


# ============================================================
# Query Input
# ============================================================

class FilterState(BaseModel):
    """User search and filter criteria for one query.

    Negative caps and depths are clamped to zero.
    """
    search_terms: list[str] = Field(default_factory=list)
    search_fields: list[str] = Field(default_factory=list)

    allowed_node_types: list[str] = Field(default_factory=list)
    allowed_edge_types: list[str] = Field(default_factory=list)

    allowed_titles: list[int] = Field(default_factory=list)
    allowed_sections: list[str] = Field(default_factory=list)

    expansion_depth: int = 1
    max_nodes_per_expansion: int = Field(default=10, description="0 = unbounded")
    max_total_nodes: int = 500

    @field_validator("expansion_depth", "max_nodes_per_expansion", "max_total_nodes")
    @classmethod
    def _clamp_non_negative(cls, value: int) -> int:
        return max(value, 0)

    @field_validator("allowed_node_types", "allowed_edge_types", mode="before")
    @classmethod
    def _enum_values(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple, set, frozenset)):
            return [v.value if isinstance(v, Enum) else v for v in value]
        return value

    @property
    def has_search(self) -> bool:
        return bool(self.search_terms) and bool(self.search_fields)

    @classmethod
    def from_settings(cls, settings=None, **overrides) -> "FilterState":
        """Default filter state from configuration, with overrides."""
        if settings is None:
            from .config import get_settings
            settings = get_settings()
        query = settings.query
        values = {
            "search_fields": list(query.search_fields),
            "expansion_depth": query.expansion_depth,
            "max_nodes_per_expansion": query.max_nodes_per_expansion,
            "max_total_nodes": query.max_total_nodes,
        }
        values.update(overrides)
        return cls(**values)


# ============================================================
# Query Output
# ============================================================

@dataclass
class NodeView:
    """Per-query display record for one surviving node."""
    id: str
    name: str
    node_type: str
    val: int = 1            # display size (local degree)
    total_val: int = 1      # pre-filter mirror of val
    color: str = ""
    base_color: str = ""    # resting color for highlight/unhighlight

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "node_type": self.node_type,
            "val": self.val,
            "total_val": self.total_val,
            "color": self.color,
            "base_color": self.base_color,
        }


@dataclass
class FilteredGraph:
    """Result of one build_network query."""
    nodes: list[NodeView] = field(default_factory=list)
    links: list[GraphLink] = field(default_factory=list)
    truncated: bool = False
    matched_count: int = 0

    @classmethod
    def empty(cls) -> "FilteredGraph":
        return cls()

    def node_ids(self) -> list[str]:
        return [n.id for n in self.nodes]

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "links": [link.model_dump(exclude_none=True) for link in self.links],
            "truncated": self.truncated,
            "matched_count": self.matched_count,
        }
