"""
Double-precision arithmetic helpers.

Python's integer and float operators differ from plain IEEE-754 double
arithmetic in a few places that matter to this package:

  - `%` is a floored remainder (sign follows the divisor); IEEE `fmod` is a
    truncated remainder (sign follows the dividend).
  - `round()` rounds half to even; the helpers here round half toward +inf.
  - Division by zero raises instead of producing inf/nan.
  - `<<` and `>>` work on unbounded ints rather than 32-bit signed words.
  - `max()`/`min()` silently ignore NaN depending on argument order.

Every public function in `utilkit.numbers` and `utilkit.colors` goes through
these helpers so that edge cases (negative operands, fractions, NaN, infinities)
produce the natural double-precision result instead of a Python exception.

Integer inputs stay integers wherever the double result would be an exact
integer, so `gdc(12, 18)` is `6` rather than `6.0`.
"""

import math

import numpy as np


_INT32_RANGE = 2 ** 32
_INT32_HALF = 2 ** 31
_MAX_SAFE_INTEGER = 2 ** 53
_HEX_DIGITS = "0123456789abcdefABCDEF"


def _is_integer(value) -> bool:
    # bool is an int subclass but never reaches here (validation rejects it)
    return isinstance(value, (int, np.integer))


def is_nan(value) -> bool:
    """Return True if value is a float NaN (ints are never NaN)."""
    return not _is_integer(value) and math.isnan(value)


def remainder(a, b):
    """
    Truncated remainder: the sign of the result follows the dividend.

    **Mathematical**:
        remainder(a, b) = a - b * trunc(a / b)

    This is C's `fmod`, not Python's floored `%`:
        remainder(-7, 2) == -1   while   -7 % 2 == 1

    **Edge cases** (IEEE-754):
    - b == 0 -> nan
    - a infinite -> nan
    - b infinite, a finite -> a

    Args:
        a: Dividend.
        b: Divisor.

    Returns:
        int when both operands are integers and b != 0, float otherwise.
    """
    if _is_integer(a) and _is_integer(b):
        a, b = int(a), int(b)
        if b == 0:
            return math.nan
        r = abs(a) % abs(b)
        return -r if a < 0 else r

    # np.fmod follows IEEE semantics for inf/nan/zero operands
    with np.errstate(invalid="ignore", divide="ignore"):
        return float(np.fmod(float(a), float(b)))


def divide(a, b):
    """
    True division that yields inf/-inf/nan on a zero divisor instead of raising.

    Exact integer quotients stay integers.
    """
    if b == 0:
        with np.errstate(invalid="ignore", divide="ignore"):
            return float(np.divide(float(a), float(b)))
    if _is_integer(a) and _is_integer(b) and int(a) % int(b) == 0:
        return int(a) // int(b)
    return a / b


def floor(value):
    """Floor that passes nan and infinities through unchanged."""
    if _is_integer(value):
        return int(value)
    if not math.isfinite(value):
        return float(value)
    return math.floor(value)


def round_half_up(value):
    """
    Round to the nearest integer, ties toward +inf.

    Differs from Python's round() on ties: 2.5 -> 3 (not 2) and
    -3.5 -> -3 (not -4). nan and infinities pass through unchanged.
    """
    if _is_integer(value):
        return int(value)
    if not math.isfinite(value):
        return float(value)
    rounded = math.floor(value)
    if value - rounded >= 0.5:
        rounded += 1
    return rounded


def nan_max(*values):
    """max() that returns nan if any argument is nan."""
    if any(is_nan(v) for v in values):
        return math.nan
    return max(values)


def nan_min(*values):
    """min() that returns nan if any argument is nan."""
    if any(is_nan(v) for v in values):
        return math.nan
    return min(values)


def to_int32(value) -> int:
    """
    Convert a number to a signed 32-bit integer.

    **Functionally**:
    - nan and infinities map to 0.
    - Fractions are truncated toward zero.
    - The result is wrapped modulo 2**32 into [-2**31, 2**31).

    Examples:
        to_int32(2 ** 31) == -2 ** 31
        to_int32(-1.9) == -1
    """
    if not _is_integer(value):
        if not math.isfinite(value):
            return 0
        value = math.trunc(value)
    return (int(value) + _INT32_HALF) % _INT32_RANGE - _INT32_HALF


def shift_left(value, count) -> int:
    """32-bit signed left shift; the result wraps like a machine word."""
    return to_int32(to_int32(value) << (to_int32(count) & 31))


def shift_right(value, count) -> int:
    """32-bit sign-propagating right shift."""
    return to_int32(value) >> (to_int32(count) & 31)


def format_number(value) -> str:
    """
    Render a number the way a double prints in decimal.

    Integral floats drop the trailing ".0" (1620000000.0 -> "1620000000"),
    non-finite values print as "NaN", "Infinity" or "-Infinity".
    """
    if _is_integer(value):
        return str(int(value))
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


def to_hex_string(value) -> str:
    """
    Render a number in base 16, keeping sign and fractional digits.

    No "0x" prefix and no zero padding: 255 -> "ff", -255 -> "-ff",
    0.5 -> "0.8". Fractions are expanded exactly; a double's binary fraction
    always terminates in base 16.
    """
    if _is_integer(value):
        value = int(value)
        return f"-{-value:x}" if value < 0 else f"{value:x}"
    if math.isnan(value) or math.isinf(value):
        return format_number(value)

    sign = "-" if value < 0 else ""
    value = abs(value)
    whole = math.floor(value)
    fraction = value - whole
    if fraction == 0:
        return f"{sign}{whole:x}"

    digits = []
    while fraction:
        # multiplying by 16 is exact in binary floating point
        fraction *= 16
        digit = int(fraction)
        digits.append("0123456789abcdef"[digit])
        fraction -= digit
    return f"{sign}{whole:x}.{''.join(digits)}"


def parse_hex_prefix(text: str):
    """
    Parse the longest leading base-16 integer in text.

    **Functionally**:
    - Leading whitespace is skipped, then an optional "+"/"-" sign, then an
      optional "0x"/"0X" prefix.
    - Parsing stops at the first non-hex character; trailing junk is ignored
      ("ffzz" -> 255).
    - No hex digits at all -> nan (never raises).
    - Values beyond 2**53 lose precision exactly as a double would; values
      beyond the double range become inf.

    Args:
        text: String to parse.

    Returns:
        int for exactly representable values, float (nan/inf/rounded) otherwise.
    """
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    if text[:2] in ("0x", "0X"):
        text = text[2:]

    end = 0
    while end < len(text) and text[end] in _HEX_DIGITS:
        end += 1
    if end == 0:
        return math.nan

    parsed = sign * int(text[:end], 16)
    if abs(parsed) <= _MAX_SAFE_INTEGER:
        return parsed
    try:
        return float(parsed)
    except OverflowError:
        return math.inf * sign
