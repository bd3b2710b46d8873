"""
CSV structure validation.

Ensures the transaction table has the required columns with usable values.

Time Complexity: O(n) where n = number of rows
Memory: O(1) additional beyond the DataFrame
"""

from typing import Any

import pandas as pd

REQUIRED_COLUMNS = [
    "user_id",
    "product_id",
    "category",
    "final_price",
]


class InvalidTransactionData(ValueError):
    """Raised when the transaction table cannot be turned into records."""


def validate_csv(df: Any) -> str | None:
    """
    Validate CSV structure. Returns error message if invalid, None if valid.

    Checks:
        1. All required columns present
        2. No null values in required columns
        3. 'final_price' is numeric
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        return f"Missing required columns: {', '.join(missing)}"

    null_cols = [col for col in REQUIRED_COLUMNS if df[col].isnull().any()]
    if null_cols:
        return f"Null values found in columns: {', '.join(null_cols)}"

    try:
        pd.to_numeric(df["final_price"], errors="raise")
    except (ValueError, TypeError):
        return "Column 'final_price' must contain numeric values."

    return None
