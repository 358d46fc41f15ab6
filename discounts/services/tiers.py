"""
Discount tier definitions
Holds the customer categories, their threshold brackets and category parsing
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

logger = logging.getLogger(__name__)


class Category(str, Enum):
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"


DEFAULT_CATEGORY = Category.BRONZE

# Brackets: (threshold, rate), highest threshold first
Bracket = Tuple[float, float]
TierTable = Mapping[Category, Sequence[Bracket]]

TIER_TABLE: TierTable = MappingProxyType({
    Category.BRONZE: (
        (500, 0.10),   # >500 → 10%
        (100, 0.05),   # >100 → 5%
        (0, 0.0),
    ),
    Category.SILVER: (
        (500, 0.15),
        (100, 0.10),
        (0, 0.05),
    ),
    Category.GOLD: (
        (1000, 0.25),
        (500, 0.20),
        (100, 0.15),
        (0, 0.10),
    ),
    Category.PLATINUM: (
        (5000, 0.50),
        (1000, 0.35),
        (500, 0.30),
        (0, 0.20),
    ),
})


def parse_category(value) -> Category:
    """
    Map external input to a known category

    Args:
        value: Category name in any case, or a Category member

    Returns:
        Matching Category, or DEFAULT_CATEGORY when nothing matches
    """
    if isinstance(value, Category):
        return value

    if isinstance(value, str):
        name = value.strip().upper()
        if name in Category.__members__:
            return Category[name]

    logger.warning(f"Unknown category {value!r}, falling back to {DEFAULT_CATEGORY.value}")
    return DEFAULT_CATEGORY


def validate_tier_table(table: TierTable) -> None:
    """
    Check the ordering and range invariants of a tier table

    Raises:
        ValueError: if any tier breaks an invariant
    """
    if DEFAULT_CATEGORY not in table:
        raise ValueError(f"Tier table has no entry for default category {DEFAULT_CATEGORY.value}")

    for category, brackets in table.items():
        name = getattr(category, "value", category)
        if not brackets:
            raise ValueError(f"Tier {name} has no brackets")

        for threshold, rate in brackets:
            if not 0.0 <= rate <= 1.0:
                raise ValueError(f"Tier {name}: rate {rate} is outside [0, 1]")

        for (upper, upper_rate), (lower, lower_rate) in zip(brackets, brackets[1:]):
            if upper <= lower:
                raise ValueError(f"Tier {name}: thresholds must be strictly decreasing ({upper} before {lower})")
            if upper_rate < lower_rate:
                raise ValueError(f"Tier {name}: rate above {upper} is lower than rate above {lower}")

        if brackets[-1][0] != 0:
            raise ValueError(f"Tier {name}: last threshold must be 0, got {brackets[-1][0]}")


def freeze_tier_table(table: TierTable) -> TierTable:
    """Return a read-only copy of a tier table with tuple brackets"""
    return MappingProxyType({
        category: tuple((threshold, rate) for threshold, rate in brackets)
        for category, brackets in table.items()
    })
