"""
Command-line entry point for the purchase graph analysis.

Usage:
  python -m app.main --csv ecommerce_dataset_updated.csv
  python -m app.main --csv data.csv --purchase-threshold 3 --spending-threshold 500 --json

Time Complexity: Dominated by processing pipeline (see services/processing_pipeline.py)
"""

import argparse
import json
import logging
import os
import sys
from typing import List

from app.config import (
    DATASET_PATH,
    LOG_LEVEL,
    PURCHASE_THRESHOLD,
    SPENDING_THRESHOLD,
    TOP_N,
)
from core.output.json_formatter import format_output
from core.output.report_formatter import render_report
from services.processing_pipeline import AnalysisService
from utils.csv_loader import load_transactions
from utils.validators import InvalidTransactionData

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Analyze the user-product purchase graph of an e-commerce CSV."
    )
    parser.add_argument(
        "--csv",
        default=DATASET_PATH,
        help=f"Path to transaction CSV file (default: {DATASET_PATH}).",
    )
    parser.add_argument(
        "--top-n",
        type=int,
        default=TOP_N,
        help=f"Rows shown per ranked table (default: {TOP_N}).",
    )
    parser.add_argument(
        "--purchase-threshold",
        type=int,
        default=PURCHASE_THRESHOLD,
        help=f"Minimum purchases for a super buyer (default: {PURCHASE_THRESHOLD}).",
    )
    parser.add_argument(
        "--spending-threshold",
        type=float,
        default=SPENDING_THRESHOLD,
        help=f"Minimum total spending for a super buyer (default: {SPENDING_THRESHOLD}).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON instead of text tables.",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not os.path.exists(args.csv):
        print(f"Error: file not found: {args.csv}")
        return 1

    try:
        transactions = load_transactions(args.csv)
    except (InvalidTransactionData, OSError) as e:
        logger.error("Rejected %s: %s", args.csv, e)
        print(f"Error: {e}")
        return 1

    service = AnalysisService(
        purchase_threshold=args.purchase_threshold,
        spending_threshold=args.spending_threshold,
    )
    result = service.process(transactions)

    if args.json:
        print(json.dumps(format_output(result, args.top_n), indent=2))
    else:
        print(render_report(result, args.top_n))
    return 0


if __name__ == "__main__":
    sys.exit(main())
