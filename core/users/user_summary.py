"""
User Summary — per-user purchase aggregates and super buyer classification.

Pattern: "super_buyer" when purchase count OR total spending reaches its threshold.

Time Complexity: O(E) where E = number of transactions
Memory: O(U) where U = unique users
"""

from typing import Dict, Iterable, Set, Tuple

from core.transaction import Transaction

UserSummary = Dict[str, Tuple[int, float]]


def analyze_users(transactions: Iterable[Transaction]) -> UserSummary:
    """
    Fold transactions into {user_id: (purchase_count, total_spending)}.

    The fold is commutative, so the result does not depend on input order.
    """
    summary: UserSummary = {}
    for txn in transactions:
        count, spending = summary.get(txn.user_id, (0, 0.0))
        summary[txn.user_id] = (count + 1, spending + txn.final_price)
    return summary


def identify_super_buyers(
    user_summary: UserSummary,
    purchase_threshold: int,
    spending_threshold: float,
) -> Set[str]:
    """
    Return users whose purchase count or total spending meets its threshold.

    Both bounds are inclusive. An empty set is a valid result.
    """
    return {
        user_id
        for user_id, (purchases, spending) in user_summary.items()
        if purchases >= purchase_threshold or spending >= spending_threshold
    }


def super_buyer_purchase_counts(
    user_summary: UserSummary,
    super_buyers: Set[str],
) -> Dict[str, int]:
    """Project super buyers onto their purchase counts for ranking."""
    return {user: user_summary[user][0] for user in super_buyers}
