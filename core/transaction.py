"""
Transaction record — the single input type of the analysis core.

One record per purchase line: who bought what, in which category, and for how much.
Records are frozen so every analysis stage can share the same sequence safely.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Transaction:
    user_id: str
    product_id: str
    category: str
    final_price: float
