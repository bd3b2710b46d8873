"""
Degree Distribution — bipartite degree of every user and product.

Degree is the number of transactions touching a node, so repeat purchases count.

Time Complexity: O(E)
Memory: O(U + P)
"""

from collections import Counter
from typing import Dict, Iterable, Tuple

from core.transaction import Transaction

DegreeMap = Dict[str, int]


def degree_distribution(
    transactions: Iterable[Transaction],
) -> Tuple[DegreeMap, DegreeMap]:
    """Return (user_degrees, product_degrees) from a single pass."""
    user_degrees: DegreeMap = {}
    product_degrees: DegreeMap = {}

    for txn in transactions:
        user_degrees[txn.user_id] = user_degrees.get(txn.user_id, 0) + 1
        product_degrees[txn.product_id] = product_degrees.get(txn.product_id, 0) + 1

    return user_degrees, product_degrees


def degree_histogram(degrees: DegreeMap) -> Dict[int, int]:
    """Map each degree value to the number of nodes having it, ascending by degree."""
    counts = Counter(degrees.values())
    return {k: counts[k] for k in sorted(counts)}
