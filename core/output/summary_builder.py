"""
Summary Builder — constructs run summary statistics.

Time Complexity: O(1)
Memory: O(1)
"""

from typing import Any, Dict


def build_summary(
    total_transactions: int,
    total_users: int,
    total_products: int,
    super_buyer_count: int,
    processing_time: float = 0.0,
) -> Dict[str, Any]:
    """Build the summary block for the report output."""
    return {
        "total_transactions_analyzed": total_transactions,
        "total_users": total_users,
        "total_products": total_products,
        "super_buyers_identified": super_buyer_count,
        "processing_time_seconds": round(processing_time, 2),
    }
