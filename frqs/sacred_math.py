"""
Sacred Mathematics Helpers
Fibonacci sequences, golden ratio tables, π windows and the SHA-256 mixing step
"""

import hashlib
from .constants import PHI, PI_DIGITS, PI_WINDOW_SIZE, PI_WINDOW_STRIDE


def generate_fibonacci_sequence(length):
    """
    Generate a Fibonacci sequence starting 1, 1.

    Args:
        length: Number of elements

    Returns:
        list: Fibonacci numbers (empty for length <= 0)
    """
    if length <= 0:
        return []
    if length == 1:
        return [1]

    sequence = [1, 1]
    for _ in range(2, length):
        sequence.append(sequence[-1] + sequence[-2])

    return sequence


def golden_fraction(power):
    """
    Fractional part of φ^power in double precision.

    Past 2^53 every double is an integer, so an overflowing power has
    fractional part 0 as well.
    """
    try:
        value = PHI ** power
    except OverflowError:
        return 0.0
    return value % 1


def golden_ratio_sequence(count, start=1):
    """
    Build floor(frac(φ^i) * 256) for i = start .. start + count - 1.

    Args:
        count: Number of entries
        start: First exponent (default: 1)

    Returns:
        list: Integers in [0, 255]
    """
    return [int(golden_fraction(start + i) * 256) for i in range(max(count, 0))]


def pi_window(depth):
    """Return the 10-digit π window selected by depth."""
    start = (depth * PI_WINDOW_STRIDE) % (len(PI_DIGITS) - PI_WINDOW_SIZE)
    return [int(digit) for digit in PI_DIGITS[start:start + PI_WINDOW_SIZE]]


def sha256_hex(text):
    """SHA-256 of the UTF-8 encoded text, as lowercase hex."""
    return hashlib.sha256(text.encode('utf-8')).hexdigest()
