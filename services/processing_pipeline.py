"""
Processing Pipeline — Full Analysis Orchestrator.

Coordinates the complete analysis over one transaction sequence:
   1. User aggregation (purchase count, total spending)
   2. Super buyer classification
   3. Degree distribution (users, products)
   4. Power-law fit for both distributions
   5. Bipartite graph construction + graph summary
   6. Distance-2 neighbors
   7. Category-based user connections
   8. Product-based product connections
   9. Summary block

Every stage reads the same immutable records and returns a fresh structure.

Memory: O(V + E) for graph + O(U² + P²) worst case for connection graphs.
"""

import contextlib
import logging
import time
from typing import Any, Dict, Sequence

from app.config import PURCHASE_THRESHOLD, SPENDING_THRESHOLD
from core.connections.category_connections import build_category_connections
from core.connections.product_connections import build_product_connections
from core.degree.degree_distribution import degree_distribution
from core.degree.power_law import fit_power_law
from core.graph.distance_two import compute_distance_2_neighbors
from core.graph.graph_builder import build_bipartite_graph
from core.graph.graph_metrics import compute_graph_summary
from core.output.summary_builder import build_summary
from core.transaction import Transaction
from core.users.user_summary import analyze_users, identify_super_buyers

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def log_timer(label: str):
    start = time.time()
    yield
    elapsed = time.time() - start
    logger.info("Module [%s] took %.4f seconds", label, elapsed)


class AnalysisService:
    """Orchestrates the complete purchase-graph analysis."""

    def __init__(
        self,
        purchase_threshold: int = PURCHASE_THRESHOLD,
        spending_threshold: float = SPENDING_THRESHOLD,
    ):
        self.purchase_threshold = purchase_threshold
        self.spending_threshold = spending_threshold

    def process(self, transactions: Sequence[Transaction]) -> Dict[str, Any]:
        """
        Run every analysis stage on validated transaction records.

        Returns:
            dict with user_summary, super_buyers, user_degrees, product_degrees,
            user_power_law, product_power_law, graph, graph_summary, distance_2,
            category_connections, product_connections, summary
        """
        t_start = time.time()
        transactions = tuple(transactions)

        # 1-2. Users and super buyers
        with log_timer("user_aggregation"):
            user_summary = analyze_users(transactions)
            super_buyers = identify_super_buyers(
                user_summary, self.purchase_threshold, self.spending_threshold
            )
        logger.info(
            "Super buyers: %d of %d users (purchases >= %d or spending >= %.2f)",
            len(super_buyers), len(user_summary),
            self.purchase_threshold, self.spending_threshold,
        )

        # 3-4. Degrees and power-law fit
        with log_timer("degree_distribution"):
            user_degrees, product_degrees = degree_distribution(transactions)

        with log_timer("power_law_fit"):
            user_power_law = fit_power_law(user_degrees)
            product_power_law = fit_power_law(product_degrees)

        # 5-6. Bipartite graph and distance-2 neighbors
        with log_timer("graph_construction"):
            G = build_bipartite_graph(transactions)
            graph_summary = compute_graph_summary(G)

        with log_timer("distance_2_neighbors"):
            distance_2 = compute_distance_2_neighbors(G)

        # 7-8. Derived connection graphs
        with log_timer("category_connections"):
            category_connections = build_category_connections(transactions)

        with log_timer("product_connections"):
            product_connections = build_product_connections(transactions)

        summary = build_summary(
            total_transactions=len(transactions),
            total_users=len(user_degrees),
            total_products=len(product_degrees),
            super_buyer_count=len(super_buyers),
            processing_time=time.time() - t_start,
        )

        return {
            "user_summary": user_summary,
            "super_buyers": super_buyers,
            "user_degrees": user_degrees,
            "product_degrees": product_degrees,
            "user_power_law": user_power_law,
            "product_power_law": product_power_law,
            "graph": G,
            "graph_summary": graph_summary,
            "distance_2": distance_2,
            "category_connections": category_connections,
            "product_connections": product_connections,
            "summary": summary,
        }
