"""
Integer and float-array math utilities.

This module provides small, checked arithmetic helpers. Two families live here:

  - Integer operations (add, divide, power, parity...) that honour a signed
    64-bit contract. Python integers are unbounded, so every result is checked
    against [INT64_MIN, INT64_MAX] and ArithmeticOverflowError is raised
    instead of returning a value a 64-bit caller could not hold.
  - Float-array operations (sum, average, min/max, variance) backed by numpy.
    Inputs are copied into float64 arrays and never mutated.

**NaN policy**: NaN propagates. If any element of the array is NaN, sum,
average, max_in_array and min_in_array return NaN. Nothing is silently
skipped.

Note that several helpers deliberately reuse builtin names (sum, max, min,
abs) to match the public API; code in this module uses `builtins.` when it
needs the originals.
"""

import builtins
from typing import Sequence

import numpy as np

from src.utils.errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    InvalidArgumentError,
)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def check_int64(value: int, operation: str) -> int:
    """
    Return `value` unchanged if it fits in a signed 64-bit integer.

    Args:
        value: Integer result to check.
        operation: Human-readable description used in the error message,
                   e.g. "add(9223372036854775807, 1)".

    Raises:
        ArithmeticOverflowError: If value < INT64_MIN or value > INT64_MAX.
    """
    if value < INT64_MIN or value > INT64_MAX:
        raise ArithmeticOverflowError(
            f"{operation} overflows the signed 64-bit range"
        )
    return value


def add(a: int, b: int) -> int:
    return check_int64(a + b, f"add({a}, {b})")


def subtract(a: int, b: int) -> int:
    return check_int64(a - b, f"subtract({a}, {b})")


def multiply(a: int, b: int) -> int:
    return check_int64(a * b, f"multiply({a}, {b})")


def divide(a: int, b: int) -> int:
    """
    Integer division truncating toward zero.

    **Conceptual**: Python's `//` floors (rounds toward negative infinity), so
    -7 // 2 == -4. This helper follows the truncating convention used by
    C, Rust and Java instead: divide(-7, 2) == -3.

    **Edge cases**:
    - b == 0 raises DivisionByZeroError.
    - divide(INT64_MIN, -1) would be 2**63, which does not fit, so it raises
      ArithmeticOverflowError.

    Args:
        a: Dividend.
        b: Divisor.

    Returns:
        Quotient truncated toward zero.
    """
    if b == 0:
        raise DivisionByZeroError(f"divide({a}, 0): division by zero")

    quotient = builtins.abs(a) // builtins.abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return check_int64(quotient, f"divide({a}, {b})")


def abs(x: int) -> int:
    """
    Absolute value of a 64-bit integer.

    Raises:
        ArithmeticOverflowError: For INT64_MIN, whose absolute value (2**63)
            is not representable.
    """
    return check_int64(-x if x < 0 else x, f"abs({x})")


def abs_float(x: float) -> float:
    """Absolute value of a float (abs_float(-5.5) == 5.5; NaN stays NaN)."""
    return float(np.abs(x))


def max(a: int, b: int) -> int:
    """Larger of `a` and `b` (returns `b` when they compare equal)."""
    return a if a > b else b


def min(a: int, b: int) -> int:
    """Smaller of `a` and `b` (returns `b` when they compare equal)."""
    return a if a < b else b


def square(x: int) -> int:
    return check_int64(x * x, f"square({x})")


def cube(x: int) -> int:
    return check_int64(x * x * x, f"cube({x})")


def power(base: int, exp: int) -> int:
    """
    Raise an integer to a non-negative integer power.

    **Mathematical**: Uses exponentiation by squaring, checking each
    intermediate product against the 64-bit range. Because |base| >= 2 makes
    every partial product no larger than the final result, an intermediate
    overflow always means the final result overflows too; the check just
    fires early (and keeps huge exponents from building huge integers).

    **Edge cases**:
    - exp == 0 returns 1 for every base, including 0 (0**0 == 1 by convention).
    - exp < 0 raises InvalidArgumentError (a fractional result is not an int).
    - power(-2, 63) == INT64_MIN is representable and returned.

    Args:
        base: Integer base.
        exp: Non-negative integer exponent.

    Returns:
        base ** exp.
    """
    if exp < 0:
        raise InvalidArgumentError(
            f"power({base}, {exp}): negative exponent has no integer result"
        )

    operation = f"power({base}, {exp})"
    result = 1
    factor = base
    remaining = exp
    while remaining:
        if remaining & 1:
            result = check_int64(result * factor, operation)
        remaining >>= 1
        if remaining:
            factor = check_int64(factor * factor, operation)
    return result


def is_even(x: int) -> bool:
    # Python's % returns a non-negative remainder for a positive modulus
    return x % 2 == 0


def is_odd(x: int) -> bool:
    return x % 2 == 1


def _as_float_array(values: Sequence[float]) -> np.ndarray:
    # np.array copies, so callers' sequences are never touched
    return np.array(values, dtype=np.float64)


def _require_non_empty(values: np.ndarray, operation: str) -> None:
    if values.size == 0:
        raise InvalidArgumentError(f"{operation} is undefined for an empty array")


def sum(arr: Sequence[float]) -> float:
    """
    Sum of a float array; 0.0 for an empty array.

    numpy uses pairwise summation, which is at least as accurate as a
    left-to-right loop.
    """
    return float(np.sum(_as_float_array(arr)))


def average(arr: Sequence[float]) -> float:
    """
    Arithmetic mean: sum(arr) / len(arr).

    **Edge cases**:
    - Empty array raises InvalidArgumentError (the mean of nothing is undefined;
      returning 0.0 would hide a bug upstream).
    - Any NaN element makes the result NaN.

    Args:
        arr: Sequence of floats.

    Returns:
        Mean as a Python float.
    """
    values = _as_float_array(arr)
    _require_non_empty(values, "average")
    return float(np.mean(values))


def max_in_array(arr: Sequence[float]) -> float:
    """
    Largest element of a float array.

    Raises:
        InvalidArgumentError: If `arr` is empty.

    Returns NaN if any element is NaN (np.max propagates NaN).
    """
    values = _as_float_array(arr)
    _require_non_empty(values, "max_in_array")
    return float(np.max(values))


def min_in_array(arr: Sequence[float]) -> float:
    """
    Smallest element of a float array.

    Raises:
        InvalidArgumentError: If `arr` is empty.

    Returns NaN if any element is NaN (np.min propagates NaN).
    """
    values = _as_float_array(arr)
    _require_non_empty(values, "min_in_array")
    return float(np.min(values))


def variance(arr: Sequence[float]) -> float:
    """
    Population variance (ddof=0) of a float array.

    **Mathematical**:
        var = (1 / n) * Σ(x_i - mean)^2

    **Edge cases**:
    - Empty array raises InvalidArgumentError.
    - A single element yields 0.0.

    Args:
        arr: Sequence of floats.

    Returns:
        Population variance as a Python float.
    """
    values = _as_float_array(arr)
    _require_non_empty(values, "variance")
    return float(np.var(values, ddof=0))


def sample_variance(arr: Sequence[float]) -> float:
    """
    Sample variance (ddof=1, Bessel's correction) of a float array.

    **Mathematical**:
        s^2 = (1 / (n - 1)) * Σ(x_i - mean)^2

    **Edge cases**:
    - Empty array raises InvalidArgumentError.
    - A single element yields 0.0 rather than the NaN numpy would give for
      n - 1 == 0: one observation has no spread.
    """
    values = _as_float_array(arr)
    _require_non_empty(values, "sample_variance")
    if values.size == 1:
        return 0.0
    return float(np.var(values, ddof=1))


def standard_deviation(arr: Sequence[float]) -> float:
    """Population standard deviation: sqrt(variance(arr))."""
    return float(np.sqrt(variance(arr)))


def sample_standard_deviation(arr: Sequence[float]) -> float:
    """Sample standard deviation: sqrt(sample_variance(arr))."""
    return float(np.sqrt(sample_variance(arr)))
