"""
Distance-2 Neighbors — nodes reachable through exactly one intermediate.

In the user–product graph this yields co-purchasers for users (users sharing a
product) and co-purchased items for products (products sharing a buyer).

Time Complexity: O(sum_v deg(v) × max_deg)
Memory: O(V × D2) where D2 = average distance-2 set size
"""

from typing import Dict, Iterable, Mapping, Set, Union

import networkx as nx

from core.graph.graph_builder import build_bipartite_graph
from core.transaction import Transaction

Distance2Map = Dict[str, Set[str]]


def compute_distance_2_neighbors(
    graph: Union[nx.Graph, Mapping[str, Set[str]]],
) -> Distance2Map:
    """
    For every node v, collect x such that v–w–x for some neighbor w and x != v.

    Accepts either an ``nx.Graph`` or a plain adjacency mapping; neighbors
    without an entry of their own contribute nothing. Only the origin
    is excluded; intermediates reached again from another neighbor stay in.
    """
    distance_2: Distance2Map = {}

    for node in graph:
        reachable: Set[str] = set()
        for neighbor in graph[node]:
            if neighbor not in graph:
                continue
            for second in graph[neighbor]:
                if second != node:
                    reachable.add(second)
        distance_2[node] = reachable

    return distance_2


def distance_2_neighbors_from_transactions(
    transactions: Iterable[Transaction],
) -> Distance2Map:
    """Build the bipartite graph and derive distance-2 sets in one call."""
    return compute_distance_2_neighbors(build_bipartite_graph(transactions))
