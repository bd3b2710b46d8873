"""
Product Connections — products linked by a common purchaser.

Builds the inverse index user -> products, then connects every pair of distinct
products bought by the same user.

Time Complexity: O(E + sum_u |products_u|²)
Memory: O(P²) worst case
"""

from collections import defaultdict
from itertools import combinations
from typing import Dict, Iterable, Set

from core.transaction import Transaction

ProductConnections = Dict[str, Set[str]]


def build_product_connections(
    transactions: Iterable[Transaction],
) -> ProductConnections:
    """Return {product_id: other products co-purchased by at least one user}."""
    user_products: Dict[str, Set[str]] = defaultdict(set)
    for txn in transactions:
        user_products[txn.user_id].add(txn.product_id)

    connections: ProductConnections = {}
    for products in user_products.values():
        for product in products:
            connections.setdefault(product, set())
        for a, b in combinations(sorted(products), 2):
            connections[a].add(b)
            connections[b].add(a)

    return connections
