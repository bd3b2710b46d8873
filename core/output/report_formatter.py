"""
Console Report Formatter.

Ranks any analysis output (id -> count, or id -> set of ids) and renders the
top N entries as text lines. Empty results get an explicit message instead of
an empty table.

Time Complexity: O(N log N) for sorting
Memory: O(N)
"""

from collections.abc import Sized
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from core.users.user_summary import super_buyer_purchase_counts

Rankable = Mapping[str, Union[int, float, Sized]]


def _as_value(value: Union[int, float, Sized]) -> Union[int, float]:
    return len(value) if isinstance(value, Sized) else value


def rank_top_n(values: Rankable, top_n: int) -> List[Tuple[str, Union[int, float]]]:
    """Sort by descending value (set size for sets), ties by id, and keep top_n."""
    ranked = sorted(
        ((key, _as_value(value)) for key, value in values.items()),
        key=lambda item: (-item[1], item[0]),
    )
    return ranked[:max(top_n, 0)]


def format_top_results(values: Rankable, top_n: int, label: str) -> List[str]:
    """Render a 'Top N <label>' table, or a no-results line."""
    if not values:
        return [f"No results for {label}."]

    lines = [f"Top {top_n} {label}:"]
    for key, value in rank_top_n(values, top_n):
        lines.append(f"{key}: {value}")
    return lines


def format_super_buyers(counts: Mapping[str, int], top_n: int) -> List[str]:
    if not counts:
        return ["No super buyers found with the current thresholds."]
    return format_top_results(counts, top_n, "Super Buyers")


def format_top_connected_products(
    product_connections: Mapping[str, Sized], top_n: int
) -> List[str]:
    """Render products ranked by how many other products they are co-purchased with."""
    if not product_connections:
        return ["No results for Products by Connections."]

    lines = [f"Top {top_n} Products by Connections:"]
    for product, connection_count in rank_top_n(product_connections, top_n):
        lines.append(f"Product: {product}, Connections: {connection_count}")
    return lines


def format_power_law(label: str, exponent: Optional[float]) -> str:
    shown = "undefined" if exponent is None else f"{exponent:.2f}"
    return f"{label} Degree Power-Law Exponent: {shown}"


def render_report(result: Dict[str, Any], top_n: int) -> str:
    """Render the full console report for an AnalysisService result."""
    super_buyer_counts = super_buyer_purchase_counts(
        result["user_summary"], result["super_buyers"]
    )

    sections: List[List[str]] = [
        format_super_buyers(super_buyer_counts, top_n),
        ["Degree Distribution:"],
        format_top_results(result["user_degrees"], top_n, "Users by Degree"),
        format_top_results(result["product_degrees"], top_n, "Products by Degree"),
        [
            "Power-Law Fit:",
            format_power_law("User", result["user_power_law"]),
            format_power_law("Product", result["product_power_law"]),
        ],
        ["Distance-2 Neighbors:"],
        format_top_results(result["distance_2"], top_n, "Nodes by Distance-2 Neighbors"),
        ["Category-Based Connections:"],
        format_top_results(
            result["category_connections"], top_n, "Users by Category-Based Connections"
        ),
        ["Product-Based Connections:"],
        format_top_connected_products(result["product_connections"], top_n),
    ]
    return "\n\n".join("\n".join(lines) for lines in sections)
