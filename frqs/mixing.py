"""
Mixing Functions
Segment-level transforms applied in rotation by the fractal encoder
"""

from .char_transforms import shift_char, xor_char, rotate_char
from .constants import GOLDEN_SEQUENCE_LENGTH
from .sacred_math import generate_fibonacci_sequence, golden_ratio_sequence, pi_window, sha256_hex
from .spiral import apply_spiral


def pi_segmented_transform(segment, depth):
    """
    Transform a segment with a depth-selected window of π digits.

    For each character the window digit d picks the operation:
    d % 3 == 0 shifts forward by d, == 1 shifts back by d, otherwise XOR with d.

    Args:
        segment: Segment to transform
        depth: Current encoder round

    Returns:
        str: Transformed segment of the same length
    """
    window = pi_window(depth)
    transformed = []

    for i, char in enumerate(segment):
        digit = window[i % len(window)]

        if digit % 3 == 0:
            transformed.append(shift_char(char, digit))
        elif digit % 3 == 1:
            transformed.append(shift_char(char, -digit))
        else:
            transformed.append(xor_char(char, digit))

    return ''.join(transformed)


def golden_ratio_transform(segment, depth):
    """
    Transform a segment with the φ^1..φ^10 fractional table.

    Even positions are XORed with the table value, odd positions rotated by it.
    """
    phi_sequence = golden_ratio_sequence(GOLDEN_SEQUENCE_LENGTH)
    transformed = []

    for i, char in enumerate(segment):
        phi_value = phi_sequence[i % len(phi_sequence)]

        if i % 2 == 0:
            transformed.append(xor_char(char, phi_value))
        else:
            transformed.append(rotate_char(char, phi_value, depth))

    return ''.join(transformed)


def recursive_hash_spiral(segment, depth):
    """
    Twist a segment through 1-5 spiral passes keyed by its own hash.

    The pattern is the segment's SHA-256 truncated to the segment length.
    Between passes the working string is replaced by its own truncated hash.

    Args:
        segment: Segment to transform
        depth: Current encoder round

    Returns:
        str: Transformed segment
    """
    if not segment:
        return segment

    pattern = sha256_hex(segment)[:len(segment)]

    fibonacci = generate_fibonacci_sequence(depth + 3)
    iterations = fibonacci[depth] % 5 + 1

    result = segment
    for i in range(iterations):
        clockwise = (depth + i) % 2 == 0
        result = apply_spiral(result, pattern, clockwise)

        if i < iterations - 1:
            result = sha256_hex(result)[:len(segment)]

    return result


# Applied in rotation by segment index
MIXERS = (
    pi_segmented_transform,
    golden_ratio_transform,
    recursive_hash_spiral,
)
