"""
Discount calculation service
Handles discount calculation based on category threshold tiers
"""

import logging
import math
from typing import Optional

from discounts.config import MAX_DISCOUNT_CAP
from discounts.services.tiers import (
    DEFAULT_CATEGORY,
    TIER_TABLE,
    TierTable,
    freeze_tier_table,
    parse_category,
    validate_tier_table,
)

logger = logging.getLogger(__name__)


class DiscountCalculator:
    """
    Tiered discount calculator over an injected tier table

    The table and cap are fixed at construction, so one instance can be
    shared between threads.
    """

    def __init__(self, tier_table: TierTable = TIER_TABLE,
                 max_discount: float = MAX_DISCOUNT_CAP):
        validate_tier_table(tier_table)
        if not math.isfinite(max_discount) or max_discount < 0:
            raise ValueError(f"max_discount must be a finite non-negative number, got {max_discount}")

        self._tiers = freeze_tier_table(tier_table)
        self._max_discount = float(max_discount)

    @property
    def max_discount(self) -> float:
        return self._max_discount

    def _brackets(self, category):
        category = parse_category(category)
        brackets = self._tiers.get(category)
        if brackets is None:
            logger.warning(f"No tier configured for {category.value}, using {DEFAULT_CATEGORY.value}")
            brackets = self._tiers[DEFAULT_CATEGORY]
        return brackets

    def select_rate(self, amount: float, category) -> float:
        """
        Pick the rate of the first bracket whose threshold the amount exceeds

        Args:
            amount: Order amount
            category: Category name or Category member

        Returns:
            Rate as a fraction in [0, 1]
        """
        return self._select(self._brackets(category), amount)

    @staticmethod
    def _select(brackets, amount: float) -> float:
        rate = brackets[-1][1]  # Base rate

        for threshold, bracket_rate in brackets:
            if amount > threshold:
                rate = bracket_rate
                break

        return rate

    def calculate(self, amount: float, category) -> float:
        """
        Calculate the discount for an amount in a category

        Args:
            amount: Order amount, zero or negative amounts get no discount
            category: Category name in any case; unknown names use Bronze

        Returns:
            Discount amount, capped at max_discount unless the tier has a single bracket
        """
        amount = float(amount)
        if amount <= 0:
            return 0.0

        brackets = self._brackets(category)
        rate = self._select(brackets, amount)
        discount = amount * rate

        # Single-bracket tiers skip the cap
        if len(brackets) > 1:
            discount = max(0.0, min(discount, self._max_discount))

        logger.debug(f"Discount for {amount} in {category!r}: rate={rate}, discount={discount}")
        return discount


_default_calculator: Optional[DiscountCalculator] = None


def _get_default_calculator() -> DiscountCalculator:
    """Get the calculator built from the default tier table"""
    global _default_calculator
    if _default_calculator is None:
        _default_calculator = DiscountCalculator()
    return _default_calculator


def calculate_discount(amount: float, category) -> float:
    """
    Calculate a discount with the default tier table and configured cap
    """
    return _get_default_calculator().calculate(amount, category)
