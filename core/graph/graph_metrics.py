"""
Graph Metrics — summary statistics for the user–product graph.

Time Complexity: O(V + E)
Memory: O(1)
"""

from typing import Any, Dict

import networkx as nx

from core.graph.graph_builder import get_nodes_by_side


def compute_graph_summary(G: nx.Graph) -> Dict[str, Any]:
    """Return basic graph-level metrics."""
    n = G.number_of_nodes()
    return {
        "user_nodes": len(get_nodes_by_side(G, 0)),
        "product_nodes": len(get_nodes_by_side(G, 1)),
        "total_nodes": n,
        "unique_edges": G.number_of_edges(),
        "density": round(nx.density(G), 4) if n > 1 else 0.0,
        "is_connected": nx.is_connected(G) if n > 0 else False,
        "num_connected_components": nx.number_connected_components(G),
    }
