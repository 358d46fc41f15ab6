#!/usr/bin/env python3
"""
Discount Calculator - Command Line Entry Point
"""

import argparse
import logging
from typing import List, Optional

from discounts.config import LOG_LEVEL
from discounts.services.discount import calculate_discount
from discounts.utils.validators import parse_money

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="discounts",
        description="Calculate a tiered discount for an amount and customer category",
    )
    parser.add_argument("amount", help="Order amount, e.g. 501 or 100,01")
    parser.add_argument("category", nargs="?", default="bronze",
                        help="Customer category: bronze, silver, gold or platinum")
    parser.add_argument("--log-level", default=LOG_LEVEL,
                        help="Logging level (default: %(default)s)")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, calculate and print the discount"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        amount = parse_money(args.amount)
    except ValueError as e:
        parser.error(str(e))

    discount = calculate_discount(amount, args.category)
    logger.info(f"Calculated discount {discount} for amount {amount}, category {args.category}")
    print(f"Discount: {discount:.2f}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
