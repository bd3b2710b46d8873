"""
Category Connections — users linked by buying in a shared category.

Builds the inverse index category -> users, then connects every pair of distinct
users inside each group. A pair sharing several categories is stored once.

Time Complexity: O(E + sum_c |users_c|²)
Memory: O(U²) worst case
"""

from collections import defaultdict
from itertools import combinations
from typing import Dict, Iterable, Set

from core.transaction import Transaction

CategoryConnections = Dict[str, Set[str]]


def build_category_connections(
    transactions: Iterable[Transaction],
) -> CategoryConnections:
    """Return {user_id: other users sharing at least one purchase category}."""
    category_users: Dict[str, Set[str]] = defaultdict(set)
    for txn in transactions:
        category_users[txn.category].add(txn.user_id)

    connections: CategoryConnections = {}
    for users in category_users.values():
        for user in users:
            connections.setdefault(user, set())
        for a, b in combinations(sorted(users), 2):
            connections[a].add(b)
            connections[b].add(a)

    return connections
