"""
utilkit: small stateless helpers.

Three namespaces, each a module of pure functions:

  - timestamps: chat timestamp markup (<t:1620000000:F>)
  - numbers: parity, primality, random integers, averages, GCD/LCM
  - colors: RGB / HEX / HSL conversions and random colors

Usage:
    from utilkit import colors, numbers, timestamps

    timestamps.from_date(1620000000000, "FULL")   # '<t:1620000000:F>'
    numbers.lcm_array([12, 18, 24])               # 72
    colors.hex_to_hsl("#ff0000")                  # HSL(h=0, s=100, l=50)
"""

from utilkit import colors, numbers, timestamps
from utilkit.utils.validation import InvalidArgumentError

__all__ = ["colors", "numbers", "timestamps", "InvalidArgumentError"]

__version__ = "0.1.0"
