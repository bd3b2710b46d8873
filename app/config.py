"""
Runtime configuration, read once from the environment.

Command-line flags in app.main override these defaults.
"""

import os

PURCHASE_THRESHOLD = int(os.getenv("PURCHASE_THRESHOLD", "5"))
SPENDING_THRESHOLD = float(os.getenv("SPENDING_THRESHOLD", "1000.0"))
TOP_N = int(os.getenv("TOP_N", "5"))
DATASET_PATH = os.getenv("DATASET_PATH", "ecommerce_dataset_updated.csv")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
