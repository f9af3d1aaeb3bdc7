"""
Numeric helpers: parity, primality, random integers, averages, GCD and LCM.

All functions validate that their arguments are numbers (see
utilkit.utils.validation) and otherwise follow double-precision arithmetic:
remainders are truncated (sign of the dividend), division by zero yields
inf/nan, and nothing is range-checked. Integer arguments give integer results
wherever the arithmetic is exact.
"""

import math
import operator
from functools import reduce

import numpy as np

from utilkit.utils.ieee import divide, floor, remainder
from utilkit.utils.validation import require_all_numeric, require_numeric


def is_even(num) -> bool:
    """
    Check whether num is even.

    **Functionally**: True when the truncated remainder of num / 2 is zero.
    Fractions are never even (2.5 -> False); nan and infinities are not even.

    Raises:
        InvalidArgumentError: If num is not numeric.
    """
    require_numeric(num=num)
    return remainder(num, 2) == 0


def is_odd(num) -> bool:
    """
    Check whether num is odd.

    Exactly the negation of is_even, so fractions (2.5), nan and infinities all
    count as odd.

    Raises:
        InvalidArgumentError: If num is not numeric.
    """
    require_numeric(num=num)
    return remainder(num, 2) != 0


def is_prime(num) -> bool:
    """
    Check whether num is prime by trial division.

    **Mathematical**: num is prime when num >= 2 and no integer i with
    2 <= i <= sqrt(num) divides it.

    **Functionally**:
    - Values below 2 (including negatives) -> False.
    - Divisors are tried in order 2, 3, 4, ... and the first hit returns False.
    - Fractions are not special-cased: 7.5 is "prime" because no integer divides
      it evenly, while 4.0 is not.
    - nan -> True (every comparison with nan is False, so no divisor is tried).
    - inf never terminates (the loop bound is infinite and inf % i is nan).

    Args:
        num: Number to test.

    Returns:
        True if num is prime.

    Raises:
        InvalidArgumentError: If num is not numeric.

    Example:
        >>> is_prime(17)
        True
        >>> is_prime(18)
        False
    """
    require_numeric(num=num)
    if num < 2:
        return False
    limit = math.sqrt(num)
    divisor = 2
    while divisor <= limit:
        if remainder(num, divisor) == 0:
            return False
        divisor += 1
    return True


def random(min_value, max_value, *, seed: int | None = None):
    """
    Draw a random integer between min_value and max_value, both inclusive.

    **Mathematical**:
        result = floor(U * (max - min + 1)) + min,   U ~ Uniform[0, 1)

    **Functionally**:
    - For integer bounds with min <= max the result is uniform over the
      integers in [min, max].
    - Fractional bounds are not floored: min is added after flooring, so
      random(0.5, 2.5) returns one of 0.5, 1.5, 2.5.
    - min > max is not corrected; the span becomes zero or negative and the
      result lands at or below min.

    Args:
        min_value: Lower bound.
        max_value: Upper bound.
        seed: Random seed for reproducibility (None for random). Reseeds NumPy's
              global generator before drawing.

    Returns:
        Random value from the range.

    Raises:
        InvalidArgumentError: If either bound is not numeric.

    Example:
        >>> random(1, 10, seed=42) == random(1, 10, seed=42)
        True
    """
    require_numeric(min=min_value, max=max_value)

    # Set random seed for reproducibility if provided
    if seed is not None:
        np.random.seed(seed)

    span = max_value - min_value + 1
    return floor(np.random.random() * span) + min_value


def average(*numbers):
    """
    Arithmetic mean of the positional arguments.

    **Functionally**:
    - average(1, 2, 3, 4, 5) -> 3; average(1, 2, 3, 4, 5, 6) -> 3.5.
    - The values are summed left to right with no starting value, so calling
      with no arguments raises the fold's TypeError.
    - A nan anywhere makes the result nan.

    Raises:
        InvalidArgumentError: If any argument is not numeric.
    """
    values = require_all_numeric(numbers)
    return divide(reduce(operator.add, values), len(values))


def gdc(a, b):
    """
    Greatest common divisor by Euclid's algorithm.

    **Mathematical**:
        gdc(a, 0) = a
        gdc(a, b) = gdc(b, a mod b)
    with a truncated remainder (sign follows the dividend).

    **Edge cases**:
    - The sign of the result depends on the inputs: gdc(12, -18) == -6.
    - gdc(0, 0) == 0, which makes lcm(0, 0) nan.
    - Fractions recurse on float remainders: gdc(1.5, 0.5) == 0.5.
    - A nan argument never reaches b == 0 and raises RecursionError.

    Args:
        a: First number.
        b: Second number.

    Returns:
        The greatest common divisor.

    Raises:
        InvalidArgumentError: If a or b is not numeric.

    Example:
        >>> gdc(12, 18)
        6
    """
    require_numeric(a=a, b=b)
    return a if b == 0 else gdc(b, remainder(a, b))


def gdc_array(numbers):
    """
    Greatest common divisor of a sequence, folded left to right through gdc.

    A single element is returned unchanged; an empty sequence raises the fold's
    TypeError.

    Raises:
        InvalidArgumentError: If any element is not numeric.

    Example:
        >>> gdc_array([12, 18, 24])
        6
    """
    values = require_all_numeric(numbers)
    return reduce(gdc, values)


def lcm(a, b):
    """
    Least common multiple.

    **Mathematical**:
        lcm(a, b) = |a * b| / gdc(a, b)

    The sign follows gdc, so a negative gdc gives a negative lcm. When gdc is
    zero the division yields nan (0 / 0) instead of raising.

    Raises:
        InvalidArgumentError: If a or b is not numeric.

    Example:
        >>> lcm(12, 18)
        36
    """
    require_numeric(a=a, b=b)
    return divide(abs(a * b), gdc(a, b))


def lcm_array(numbers):
    """
    Least common multiple of a sequence, folded left to right through lcm.

    Raises:
        InvalidArgumentError: If any element is not numeric.

    Example:
        >>> lcm_array([12, 18, 24])
        72
    """
    values = require_all_numeric(numbers)
    return reduce(lcm, values)
