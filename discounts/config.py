"""
Configuration module for the discount calculator
Loads environment variables and provides typed constants
"""

import math
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Discount cap
MAX_DISCOUNT_CAP_STR = os.getenv("MAX_DISCOUNT_CAP", "10000")
try:
    MAX_DISCOUNT_CAP: float = float(MAX_DISCOUNT_CAP_STR.strip())
except ValueError:
    raise RuntimeError("MAX_DISCOUNT_CAP must be a number")
if not math.isfinite(MAX_DISCOUNT_CAP):
    raise RuntimeError("MAX_DISCOUNT_CAP must be finite")
if MAX_DISCOUNT_CAP < 0:
    raise RuntimeError("MAX_DISCOUNT_CAP must not be negative")

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
