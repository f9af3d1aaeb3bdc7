"""
utilkit – Main entry point.

Minimal bootstrap script that prints one sample from each namespace.
"""

from utilkit import colors, numbers, timestamps


def main() -> None:
    """Print a short demonstration of each helper namespace."""
    print(f"timestamps.from_date(1620000000000) -> {timestamps.from_date(1620000000000)}")
    print(f"timestamps.from_now(60000, 'RELATIVE') -> {timestamps.from_now(60000, 'RELATIVE')}")
    print(f"numbers.gdc_array([12, 18, 24]) -> {numbers.gdc_array([12, 18, 24])}")
    print(f"numbers.lcm_array([12, 18, 24]) -> {numbers.lcm_array([12, 18, 24])}")
    print(f"colors.hex_to_hsl('#ff8000') -> {colors.hex_to_hsl('#ff8000')}")
    print(f"colors.hsl_to_hex(210, 50, 40) -> {colors.hsl_to_hex(210, 50, 40)}")
    print("utilkit bootstrap complete")


if __name__ == "__main__":
    main()
