"""
Color conversions between RGB, HEX and HSL, plus random color generators.

**Representations**:
  - RGB: three channels, intended range [0, 255].
  - HEX: "#rrggbb" string; "#" optional and case-insensitive on input.
  - HSL: hue in degrees [0, 360), saturation and lightness in percent [0, 100].

Only argument types are validated. Out-of-range channels, negative values and
malformed hex strings are not rejected; they flow through the same 32-bit
bit-packing and double-precision arithmetic as valid input and yield whatever
that produces (wrapped channels, zero channels, odd-looking hex strings).
"""

from dataclasses import dataclass

import numpy as np

from utilkit.utils.ieee import (
    divide,
    floor,
    nan_max,
    nan_min,
    parse_hex_prefix,
    remainder,
    round_half_up,
    shift_left,
    shift_right,
    to_hex_string,
    to_int32,
)
from utilkit.utils.validation import require_numeric, require_string


@dataclass(frozen=True)
class RGB:
    """
    Red, green and blue channels.

    Iterable, so `r, g, b = hex_to_rgb("#ff8000")` works.
    """
    r: int
    g: int
    b: int

    def __iter__(self):
        return iter((self.r, self.g, self.b))


@dataclass(frozen=True)
class HSL:
    """Hue (degrees), saturation (percent) and lightness (percent)."""
    h: int
    s: int
    l: int

    def __iter__(self):
        return iter((self.h, self.s, self.l))


def _seed(seed: int | None) -> None:
    # Set random seed for reproducibility if provided
    if seed is not None:
        np.random.seed(seed)


def rgb_to_hex(r, g, b) -> str:
    """
    Pack three channels into a "#rrggbb" string.

    **Mathematical**:
        value = 2**24 + (r << 16) + (g << 8) + b
    rendered in base 16 with its leading "1" dropped, which zero-pads each
    channel to two digits.

    **Functionally**:
    - Shifts are 32-bit signed, so r and g are truncated to integers and
      wrapped; b is added as-is.
    - No clamping: rgb_to_hex(256, 0, 0) == "#000000" (red overflows into the
      dropped digit) and rgb_to_hex(-1, 0, 0) == "#f0000" (five digits).

    Raises:
        InvalidArgumentError: If any channel is not numeric.

    Example:
        >>> rgb_to_hex(255, 128, 0)
        '#ff8000'
    """
    require_numeric(r=r, g=g, b=b)
    packed = (1 << 24) + shift_left(r, 16) + shift_left(g, 8) + b
    return f"#{to_hex_string(packed)[1:]}"


def hex_to_rgb(hex: str) -> RGB:
    """
    Unpack a hex color string into channels.

    **Functionally**:
    - The first "#" is removed, then the longest leading base-16 number is
      parsed (see utilkit.utils.ieee.parse_hex_prefix).
    - Channels are (v >> 16) & 255, (v >> 8) & 255 and v & 255 on the value
      as a 32-bit signed int.
    - Short forms are not expanded: "#f00" is 0x000f00 -> RGB(0, 15, 0).
    - Unparseable strings give RGB(0, 0, 0) rather than an error.

    Raises:
        InvalidArgumentError: If hex is not a string.

    Example:
        >>> hex_to_rgb("#ff8000")
        RGB(r=255, g=128, b=0)
    """
    require_string(hex=hex)
    value = parse_hex_prefix(hex.replace("#", "", 1))
    return RGB(
        r=shift_right(value, 16) & 255,
        g=shift_right(value, 8) & 255,
        b=to_int32(value) & 255,
    )


def random_hex(*, seed: int | None = None) -> str:
    """
    Random 24-bit color as bare base-16 digits.

    No "#" and no zero padding: small draws give fewer than six digits
    ("3fa"). The upper bound is 0xfffffe.
    """
    _seed(seed)
    return to_hex_string(floor(np.random.random() * 16777215))


def random_rgb(*, seed: int | None = None) -> RGB:
    """Random color with each channel drawn independently from [0, 254]."""
    _seed(seed)
    return RGB(
        r=floor(np.random.random() * 255),
        g=floor(np.random.random() * 255),
        b=floor(np.random.random() * 255),
    )


def hsl_to_rgb(h, s, l) -> RGB:
    """
    Convert HSL to RGB.

    **Mathematical**: With s and l scaled to [0, 1]:
        k(n) = (n + h / 30) mod 12
        a    = s * min(l, 1 - l)
        f(n) = l - a * max(min(k(n) - 3, 9 - k(n), 1), -1)
        (r, g, b) = round(255 * (f(0), f(8), f(4)))

    The mod is a truncated remainder, so negative hues give negative k(n);
    rounding is half-up.

    Raises:
        InvalidArgumentError: If any component is not numeric.

    Example:
        >>> hsl_to_rgb(120, 100, 50)
        RGB(r=0, g=255, b=0)
    """
    require_numeric(h=h, s=s, l=l)
    s = s / 100
    l = l / 100

    def k(n):
        return remainder(n + h / 30, 12)

    a = s * nan_min(l, 1 - l)

    def f(n):
        return l - a * nan_max(nan_min(k(n) - 3, 9 - k(n), 1), -1)

    return RGB(
        r=round_half_up(f(0) * 255),
        g=round_half_up(f(8) * 255),
        b=round_half_up(f(4) * 255),
    )


def rgb_to_hsl(r, g, b) -> HSL:
    """
    Convert RGB to HSL.

    **Mathematical**: With channels scaled to [0, 1], max/min over them and
    delta = max - min:
        l = (max + min) / 2
        s = delta / (1 - |2l - 1|)
        h = 60 * ((g - b) / delta mod 6)   if max is r
            60 * ((b - r) / delta + 2)     if max is g
            60 * ((r - g) / delta + 4)     if max is b

    **Functionally**:
    - The max channel is matched in r, g, b order, so ties go to red first.
    - Grayscale (delta == 0) leaves h and s at 0.
    - The hue is rounded, wrapped into [0, 360) by adding 360 if negative,
      then rounded once more with s and l. All rounding is half-up.

    Raises:
        InvalidArgumentError: If any channel is not numeric.

    Example:
        >>> rgb_to_hsl(255, 0, 128)
        HSL(h=330, s=100, l=50)
    """
    require_numeric(r=r, g=g, b=b)
    r = r / 255
    g = g / 255
    b = b / 255

    high = nan_max(r, g, b)
    low = nan_min(r, g, b)
    delta = high - low
    h = 0
    s = 0
    l = (high + low) / 2

    if delta != 0:
        s = divide(delta, 1 - abs(2 * l - 1))

        if high == r:
            h = remainder((g - b) / delta, 6)
        elif high == g:
            h = (b - r) / delta + 2
        elif high == b:
            h = (r - g) / delta + 4

        h = round_half_up(h * 60)
        if h < 0:
            h += 360

    return HSL(
        h=round_half_up(h),
        s=round_half_up(s * 100),
        l=round_half_up(l * 100),
    )


def random_hsl(*, seed: int | None = None) -> HSL:
    """Random color with h in [0, 359] and s, l in [0, 99]."""
    _seed(seed)
    return HSL(
        h=floor(np.random.random() * 360),
        s=floor(np.random.random() * 100),
        l=floor(np.random.random() * 100),
    )


def hex_to_hsl(hex: str) -> HSL:
    """
    Convert a hex color string to HSL (hex_to_rgb, then rgb_to_hsl).

    Raises:
        InvalidArgumentError: If hex is not a string.
    """
    require_string(hex=hex)
    return rgb_to_hsl(*hex_to_rgb(hex))


def hsl_to_hex(h, s, l) -> str:
    """
    Convert HSL to a hex color string (hsl_to_rgb, then rgb_to_hex).

    Raises:
        InvalidArgumentError: If any component is not numeric.
    """
    require_numeric(h=h, s=s, l=l)
    return rgb_to_hex(*hsl_to_rgb(h, s, l))
