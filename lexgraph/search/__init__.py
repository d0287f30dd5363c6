"""
Search module - Keyword matching and attribute filtering over graph nodes.

Provides:
- KeywordSearch: multi-field AND/OR substring search
- AttributeFilter: type/title/section predicates
- FIELD_RESOLVERS: field key -> fallback resolver chain
"""
from .field_resolvers import FIELD_RESOLVERS, resolve_field, searchable_values
from .keyword_search import KeywordSearch, normalize_terms
from .attribute_filter import AttributeFilter

__all__ = [
    "FIELD_RESOLVERS",
    "resolve_field",
    "searchable_values",
    "KeywordSearch",
    "normalize_terms",
    "AttributeFilter",
]
