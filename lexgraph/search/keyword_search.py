"""
Multi-field keyword search over graph nodes.

Provides:
- Case-insensitive substring matching
- AND / OR combination of terms
- Field fallback chains from field_resolvers
"""
import logging
from typing import Iterable, Sequence

from ..core.schemas import GraphNode, SearchLogic
from .field_resolvers import searchable_values

logger = logging.getLogger(__name__)


def normalize_terms(terms: Iterable[str]) -> list[str]:
    """Lower-case and trim terms.

    A term that trims to "" is kept; it is contained in every value.
    """
    return [str(term).strip().lower() for term in terms]


class KeywordSearch:
    """
    Keyword matcher over a fixed node list.

    Under OR a node matches if any term is contained in any resolved value.
    Under AND every term must be contained in at least one resolved value
    (terms may match different values).
    """

    def __init__(self, nodes: Sequence[GraphNode]):
        self.nodes = nodes

    def search(
        self,
        terms: Sequence[str],
        fields: Sequence[str],
        logic: SearchLogic | str = SearchLogic.OR
    ) -> set[str]:
        """
        Find nodes matching the search terms.

        Args:
            terms: Search terms (case-insensitive)
            fields: Field keys to search in
            logic: AND or OR

        Returns:
            Set of matching node ids; empty when terms or fields are empty
        """
        logic = SearchLogic.coerce(logic)
        normalized = normalize_terms(terms)
        if not normalized or not fields:
            return set()

        combine = all if logic == SearchLogic.AND else any
        matched: set[str] = set()

        for node in self.nodes:
            values = searchable_values(node, fields)
            if not values:
                continue
            if combine(any(term in value for value in values) for term in normalized):
                matched.add(node.id)

        logger.debug(
            f"Search {normalized} in {list(fields)} ({logic.value}): "
            f"{len(matched)} matching nodes"
        )
        return matched
