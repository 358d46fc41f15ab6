"""
Validation utilities module
Contains regex patterns and validation functions for amount input
"""

import re

# Regex patterns
MONEY_RGX = r"^[+-]?\d+(?:\.\d{1,2})?$"

def normalize_money(s: str) -> str:
    """
    Normalize money string by replacing comma with dot

    Args:
        s: Money string to normalize

    Returns:
        Normalized money string
    """
    return s.strip().replace(",", ".")

def is_money(s: str) -> bool:
    """
    Validate signed money format, comma or dot as decimal separator

    Args:
        s: String to validate

    Returns:
        True if valid money format, False otherwise
    """
    return bool(re.match(MONEY_RGX, normalize_money(s)))

def parse_money(s: str) -> float:
    """Convert a money string to float, raising ValueError if it is malformed"""
    if not is_money(s):
        raise ValueError(f"Invalid amount: {s!r}")
    return float(normalize_money(s))
