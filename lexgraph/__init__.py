"""
LexGraph - Query engine for legal knowledge graphs

Filters a large, static graph of statute sections, index nodes, defined
entities and concepts down to a bounded, relevant, colored subgraph:
- Multi-field keyword search with AND/OR logic
- Bounded multi-hop neighbor expansion
- Isolate pruning and degree-based truncation (global or subgraph ranking)
- Degree-to-color visual encoding per node type

Modules:
    core        - Configuration, pydantic schemas, exceptions
    search      - Field resolver table, keyword search, attribute filter
    graph       - Adjacency index (NetworkX), expansion, ranking, network builder
    ingestion   - Validation and loading of node/link records
"""

__version__ = "0.1.0"
