"""
Transaction loader — turns a CSV file into validated Transaction records.

Rows with final_price <= 0 are dropped; any schema problem aborts the load.

Time Complexity: O(n) where n = number of rows
Memory: O(n)
"""

import logging
from typing import List

import pandas as pd

from core.transaction import Transaction
from utils.validators import InvalidTransactionData, validate_csv

logger = logging.getLogger(__name__)

_ID_COLUMNS = ["user_id", "product_id", "category"]


def transactions_from_frame(df: pd.DataFrame) -> List[Transaction]:
    """
    Validate a DataFrame and convert its positive-price rows to records.

    Raises:
        InvalidTransactionData: if validate_csv rejects the frame.
    """
    validation_error = validate_csv(df)
    if validation_error:
        raise InvalidTransactionData(validation_error)

    prices = pd.to_numeric(df["final_price"]).astype(float)
    keep = prices > 0
    dropped = int((~keep).sum())
    if dropped:
        logger.info("Dropped %d rows with non-positive final_price", dropped)

    kept = df.loc[keep, _ID_COLUMNS].astype(str)
    return [
        Transaction(user_id=u, product_id=p, category=c, final_price=float(a))
        for u, p, c, a in zip(
            kept["user_id"], kept["product_id"], kept["category"], prices[keep]
        )
    ]


def load_transactions(file_path: str) -> List[Transaction]:
    """Read a CSV file and return its transaction records in file order."""
    try:
        df = pd.read_csv(file_path, dtype=str)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise InvalidTransactionData(f"Failed to parse CSV: {e}") from e

    transactions = transactions_from_frame(df)
    logger.info(
        "Loaded %d transactions from %s (%d rows)",
        len(transactions), file_path, len(df),
    )
    return transactions
