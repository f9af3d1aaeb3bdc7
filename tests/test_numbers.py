"""
Tests for utilkit/numbers.py

Hand-picked values where the expected result is easy to reason about, plus the
double-precision edge cases (negative and fractional operands, nan, zero
divisors) that the helpers deliberately pass through.
"""

import math

import numpy as np
import pytest

from utilkit.numbers import (
    average,
    gdc,
    gdc_array,
    is_even,
    is_odd,
    is_prime,
    lcm,
    lcm_array,
    random,
)
from utilkit.utils.validation import InvalidArgumentError


# --- parity -----------------------------------------------------------------

@pytest.mark.parametrize("value", [0, 1, 2, 7, -3, -4, 2.5, -2.5, 4.0, math.nan, math.inf, np.int64(10)])
def test_is_even_and_is_odd_disagree(value):
    """Test that exactly one of is_even/is_odd holds for every number."""
    assert is_even(value) != is_odd(value)


def test_parity_integers():
    """Test ordinary integers, including negatives."""
    assert is_even(4)
    assert is_odd(7)
    assert is_even(-4)
    assert is_odd(-3)
    assert is_even(0)


def test_parity_non_integers_are_odd():
    """Test that fractions and non-finite values are never even."""
    assert is_odd(2.5)
    assert is_odd(-2.5)
    assert is_even(4.0)
    assert is_odd(math.nan)
    assert is_odd(math.inf)


@pytest.mark.parametrize("func", [is_even, is_odd, is_prime])
@pytest.mark.parametrize("bad", ["a", None, True, [2]])
def test_parity_and_prime_reject_non_numeric(func, bad):
    """Test that non-numeric input raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match="The num must be a number"):
        func(bad)


# --- primality --------------------------------------------------------------

def test_is_prime_small_values():
    """Test the reference values."""
    assert is_prime(2) is True
    assert is_prime(1) is False
    assert is_prime(17) is True
    assert is_prime(18) is False


def test_is_prime_first_primes():
    """Test against the primes below 50."""
    primes = [n for n in range(50) if is_prime(n)]
    assert primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]


def test_is_prime_below_two():
    """Test that zero and negatives are never prime."""
    assert not is_prime(0)
    assert not is_prime(-7)
    assert not is_prime(1.99)


def test_is_prime_perfect_squares():
    """Test that the sqrt bound is inclusive."""
    assert not is_prime(25)
    assert not is_prime(49)
    assert not is_prime(121)


def test_is_prime_fractions_follow_raw_remainders():
    """Test that fractions are not special-cased."""
    assert is_prime(7.5)
    assert is_prime(2.5)
    assert not is_prime(9.0)


def test_is_prime_nan():
    """Test that nan skips every comparison and comes out prime."""
    assert is_prime(math.nan)


def test_is_prime_large_prime():
    """Test a larger prime."""
    assert is_prime(7919)
    assert not is_prime(7917)


# --- random -----------------------------------------------------------------

def test_random_stays_in_range_and_is_integer():
    """Test bounds and integrality over many draws."""
    for _ in range(500):
        value = random(1, 6)
        assert 1 <= value <= 6
        assert isinstance(value, int)


def test_random_hits_both_bounds():
    """Test that both endpoints are reachable (inclusive range)."""
    seen = {random(0, 2) for _ in range(500)}
    assert seen == {0, 1, 2}


def test_random_single_value_range():
    """Test min == max."""
    assert random(5, 5) == 5


def test_random_seed_is_reproducible():
    """Test that the same seed gives the same draw."""
    assert random(1, 1_000_000, seed=42) == random(1, 1_000_000, seed=42)


def test_random_fractional_min_is_not_floored():
    """Test that min is added after flooring."""
    for _ in range(100):
        assert random(0.5, 2.5) in (0.5, 1.5, 2.5)


def test_random_inverted_bounds_not_corrected():
    """Test min > max: span is zero or negative, result never exceeds min."""
    for _ in range(100):
        assert random(10, 9) == 10
        assert random(10, 5) <= 10


@pytest.mark.parametrize("bounds", [("1", 10), (1, None), (True, 3)])
def test_random_rejects_non_numeric(bounds):
    """Test validation of both bounds."""
    with pytest.raises(InvalidArgumentError, match="The min and max must be numbers"):
        random(*bounds)


# --- average ----------------------------------------------------------------

def test_average_reference_values():
    """Test the reference values."""
    assert average(1, 2, 3, 4, 5) == 3
    assert average(1, 2, 3, 4, 5, 6) == 3.5


def test_average_single_and_mixed():
    """Test one argument and mixed int/float arguments."""
    assert average(7) == 7
    assert average(1, 2.5) == pytest.approx(1.75)


def test_average_nan_propagates():
    """Test that nan anywhere makes the result nan."""
    assert math.isnan(average(1, math.nan, 3))


def test_average_empty_raises_type_error():
    """Test that no arguments is not special-cased."""
    with pytest.raises(TypeError):
        average()


def test_average_rejects_non_numeric():
    """Test validation of every argument."""
    with pytest.raises(InvalidArgumentError, match="All the arguments must be numbers"):
        average(1, 2, 3, 4, 5, "a")


# --- gdc / lcm --------------------------------------------------------------

def test_gdc_reference_values():
    """Test the reference values."""
    assert gdc(12, 18) == 6
    assert gdc(18, 12) == 6
    assert gdc(17, 5) == 1
    assert gdc(0, 5) == 5
    assert gdc(5, 0) == 5


def test_gdc_integers_stay_integers():
    """Test result type for integer input."""
    assert isinstance(gdc(12, 18), int)


def test_gdc_negative_inputs_follow_truncated_remainder():
    """Test that the sign of the result follows the raw recursion."""
    assert gdc(-12, 18) == 6
    assert gdc(12, -18) == -6
    assert gdc(-12, -18) == -6


def test_gdc_fractions():
    """Test float recursion."""
    assert gdc(1.5, 0.5) == 0.5
    assert gdc(7.5, 2.5) == 2.5


def test_gdc_rejects_non_numeric():
    """Test validation of both operands."""
    with pytest.raises(InvalidArgumentError, match="The a and b must be numbers"):
        gdc(12, "18")


def test_gdc_array_reference_values():
    """Test the reference values and a single element."""
    assert gdc_array([12, 18, 24]) == 6
    assert gdc_array((48, 180, 600)) == 12
    assert gdc_array([9]) == 9


def test_gdc_array_accepts_numpy_arrays():
    """Test that numpy arrays are valid sequences."""
    assert gdc_array(np.array([12, 18, 24])) == 6


def test_gdc_array_empty_raises_type_error():
    """Test that an empty sequence is not special-cased."""
    with pytest.raises(TypeError):
        gdc_array([])


def test_gdc_array_rejects_non_numeric():
    """Test validation of every element."""
    with pytest.raises(InvalidArgumentError, match="All the arguments must be numbers"):
        gdc_array([12, "18", 24])


def test_lcm_reference_values():
    """Test the reference values."""
    assert lcm(12, 18) == 36
    assert lcm(4, 6) == 12
    assert lcm(7, 3) == 21
    assert isinstance(lcm(12, 18), int)


def test_lcm_with_zero():
    """Test zero operands: 0 with a non-zero gcd, nan when both are zero."""
    assert lcm(0, 5) == 0
    assert math.isnan(lcm(0, 0))


def test_lcm_sign_follows_gdc():
    """Test that a negative gdc gives a negative lcm."""
    assert lcm(12, -18) == -36
    assert lcm(-12, 18) == 36


def test_lcm_rejects_non_numeric():
    """Test validation of both operands."""
    with pytest.raises(InvalidArgumentError, match="The a and b must be numbers"):
        lcm(None, 3)


def test_lcm_array_reference_values():
    """Test the reference values."""
    assert lcm_array([12, 18, 24]) == 72
    assert lcm_array([1, 2, 3, 4, 5]) == 60


def test_lcm_array_rejects_non_numeric():
    """Test validation of every element."""
    with pytest.raises(InvalidArgumentError, match="All the arguments must be numbers"):
        lcm_array([12, 18, None])
