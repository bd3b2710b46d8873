"""
Builds the undirected user–product bipartite graph from transaction records.

Nodes are user IDs (bipartite=0) and product IDs (bipartite=1), sharing one
namespace. An edge joins a user and a product whenever at least one transaction
pairs them; repeat purchases collapse into a single edge.

Time Complexity: O(E) where E = number of transactions
Memory: O(V + E') where E' = distinct user–product pairs
"""

from typing import Dict, Iterable, Set

import networkx as nx

from core.transaction import Transaction

BipartiteGraph = Dict[str, Set[str]]


def build_bipartite_graph(transactions: Iterable[Transaction]) -> nx.Graph:
    """
    Build a simple undirected graph with one edge per distinct (user, product) pair.

    Args:
        transactions: validated transaction records

    Returns:
        nx.Graph with node attribute ``bipartite`` (0 = user, 1 = product)
    """
    G = nx.Graph()

    for txn in transactions:
        G.add_node(txn.user_id, bipartite=0)
        G.add_node(txn.product_id, bipartite=1)
        G.add_edge(txn.user_id, txn.product_id)

    return G


def to_adjacency(G: nx.Graph) -> BipartiteGraph:
    """Copy the graph into a plain {node: set(neighbors)} mapping."""
    return {node: set(G[node]) for node in G}


def get_nodes_by_side(G: nx.Graph, side: int) -> Set[str]:
    """Return user nodes (side=0) or product nodes (side=1). O(V)."""
    return {n for n, d in G.nodes(data=True) if d.get("bipartite") == side}
