"""
JSON Output Formatter.

Produces the output structure:
{
    "super_buyers": [...],
    "degrees": {"users": [...], "products": [...], "histograms": {...}},
    "power_law": {"users": float | null, "products": float | null},
    "distance_2": [...],
    "category_connections": [...],
    "product_connections": [...],
    "graph": {...},
    "summary": {...}
}

Sets are reported by size; every ranked list holds the top N entries.

Time Complexity: O(V log V) for sorting
Memory: O(V)
"""

from typing import Any, Dict, List

from core.degree.degree_distribution import degree_histogram
from core.output.report_formatter import Rankable, rank_top_n
from core.users.user_summary import super_buyer_purchase_counts


def _ranked(values: Rankable, top_n: int) -> List[Dict[str, Any]]:
    return [{"id": key, "value": value} for key, value in rank_top_n(values, top_n)]


def _round_exponent(exponent: float | None) -> float | None:
    return None if exponent is None else round(exponent, 4)


def format_output(result: Dict[str, Any], top_n: int) -> Dict[str, Any]:
    """Build the final JSON-compatible output dict."""
    super_buyer_counts = super_buyer_purchase_counts(
        result["user_summary"], result["super_buyers"]
    )

    return {
        "super_buyers": _ranked(super_buyer_counts, top_n),
        "degrees": {
            "users": _ranked(result["user_degrees"], top_n),
            "products": _ranked(result["product_degrees"], top_n),
            "histograms": {
                # JSON object keys must be strings
                "users": {str(k): v for k, v in degree_histogram(result["user_degrees"]).items()},
                "products": {str(k): v for k, v in degree_histogram(result["product_degrees"]).items()},
            },
        },
        "power_law": {
            "users": _round_exponent(result["user_power_law"]),
            "products": _round_exponent(result["product_power_law"]),
        },
        "distance_2": _ranked(result["distance_2"], top_n),
        "category_connections": _ranked(result["category_connections"], top_n),
        "product_connections": _ranked(result["product_connections"], top_n),
        "graph": result["graph_summary"],
        "summary": result["summary"],
    }
