"""
Query a graph file from the command line.

Loads a {"nodes": [...], "links": [...]} JSON file, runs one network query
and prints a summary.

Usage:
    python scripts/query_network.py "gross income" --fields text definition
    python scripts/query_network.py income --logic AND --ranking subgraph --max-nodes 50
    python scripts/query_network.py income --graph data/graph.json --json
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse
import json

from lexgraph.core.config import get_settings, load_dotenv_if_exists
from lexgraph.core.exceptions import LexGraphError
from lexgraph.core.schemas import FilterState
from lexgraph.graph.network_builder import NetworkBuilder
from lexgraph.ingestion.graph_loader import load_graph_json


def main():
    load_dotenv_if_exists()
    settings = get_settings()
    settings.logging.apply()

    parser = argparse.ArgumentParser(description="Filter a legal knowledge graph")
    parser.add_argument("terms", nargs="*", help="Search terms")
    parser.add_argument("--graph", type=Path, default=None, help="Graph JSON file")
    parser.add_argument("--fields", nargs="+", default=None, help="Fields to search")
    parser.add_argument("--node-types", nargs="+", default=[], help="Allowed node types for seeds")
    parser.add_argument("--edge-types", nargs="+", default=[], help="Allowed edge types")
    parser.add_argument("--depth", type=int, default=None, help="Expansion depth")
    parser.add_argument("--per-node", type=int, default=None, help="Neighbor slots per node (0 = all)")
    parser.add_argument("--max-nodes", type=int, default=None, help="Total node cap")
    parser.add_argument("--logic", choices=["AND", "OR"], default=settings.query.search_logic)
    parser.add_argument("--ranking", choices=["global", "subgraph"], default=settings.query.ranking_mode)
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    args = parser.parse_args()

    graph_path = args.graph or settings.paths.resolve(settings.project_root).graph_data

    overrides = {
        "search_terms": args.terms,
        "allowed_node_types": args.node_types,
        "allowed_edge_types": args.edge_types,
    }
    if args.fields is not None:
        overrides["search_fields"] = args.fields
    if args.depth is not None:
        overrides["expansion_depth"] = args.depth
    if args.per_node is not None:
        overrides["max_nodes_per_expansion"] = args.per_node
    if args.max_nodes is not None:
        overrides["max_total_nodes"] = args.max_nodes

    try:
        data = load_graph_json(graph_path)
        builder = NetworkBuilder(data.nodes, data.links)
    except LexGraphError as e:
        print(f"❌ {e}")
        return 1

    state = FilterState.from_settings(settings, **overrides)
    result = builder.build_network(state, args.logic, args.ranking)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    print(f"\n🔍 Network Query\n" + "=" * 60)
    print(f"  Terms:    {', '.join(state.search_terms) or '(none)'}")
    print(f"  Fields:   {', '.join(state.search_fields)}")
    print(f"  Logic:    {args.logic}   Ranking: {args.ranking}")
    print(f"\n📊 Result:")
    print(f"  Matched:   {result.matched_count}")
    print(f"  Shown:     {len(result.nodes)} nodes, {len(result.links)} links")
    print(f"  Truncated: {result.truncated}")

    if result.nodes:
        print(f"\n🔝 Top nodes by degree:")
        for view in sorted(result.nodes, key=lambda v: v.val, reverse=True)[:10]:
            print(f"  {view.val:4d}  {view.node_type:8s} {view.name or view.id}  {view.color}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
