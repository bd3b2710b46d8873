"""
Power-Law Fit — maximum-likelihood exponent of a degree distribution.

Uses the continuous approximation for discrete degrees k:

    alpha = 1 + n / sum_i ln(k_i / k_min)

with k_min fixed to the smallest observed degree (no fitted cutoff).

Time Complexity: O(N) where N = nodes in the degree map
Memory: O(N)
"""

import logging
from typing import Mapping, Optional

import numpy as np

logger = logging.getLogger(__name__)


def fit_power_law(degrees: Mapping[str, int]) -> Optional[float]:
    """
    Estimate the power-law exponent of a degree map.

    Returns:
        The exponent, or None when it is undefined: an empty map, or a
        distribution where every degree equals k_min (zero log-sum).

    Raises:
        ValueError: if any degree is not positive.
    """
    if not degrees:
        logger.warning("Power-law fit skipped: empty degree map")
        return None

    values = np.fromiter(degrees.values(), dtype=float, count=len(degrees))
    if np.any(values <= 0):
        raise ValueError("Degrees must be positive to fit a power law.")

    k_min = float(values.min())
    log_sum = float(np.log(values / k_min).sum())

    if log_sum <= 0.0:
        logger.warning(
            "Power-law fit undefined: all %d degrees equal k_min=%.0f",
            len(values), k_min,
        )
        return None

    return 1.0 + len(values) / log_sum
