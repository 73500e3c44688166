"""
Fractal Encoder
Recursively hashes and re-segments a seed across N rounds
"""

import logging
from .constants import MAX_ENCODED_LENGTH, MAX_RECURSION_DEPTH, SACRED_SEPARATORS
from .errors import RecursionDepthError
from .mixing import MIXERS
from .sacred_math import generate_fibonacci_sequence, sha256_hex

logger = logging.getLogger(__name__)


def reverse_string(text):
    return text[::-1]


def interleave_strings(a, b):
    """
    Alternate characters of a and b up to the longer length.

    Example:
        interleave_strings("ab", "wxyz") -> "awbxyz"
    """
    result = []
    for i in range(max(len(a), len(b))):
        if i < len(a):
            result.append(a[i])
        if i < len(b):
            result.append(b[i])
    return ''.join(result)


def split_segments(text, segment_length):
    """Split text into consecutive segments; the last one may be shorter."""
    return [text[j:j + segment_length] for j in range(0, len(text), segment_length)]


def combine_with_sacred_pattern(segments, depth):
    """
    Recombine transformed segments with depth-derived separators.

    Segment i (i >= 1) is appended after separator
    SACRED_SEPARATORS[(fib[i] * depth) % 9]:
        i % 3 == 0 -> reversed
        i % 3 == 1 -> interleaved with the last character combined so far
        i % 3 == 2 -> as-is
    Empty segments are skipped.

    Args:
        segments: Transformed segments
        depth: Current encoder round

    Returns:
        str: Combined string, at most MAX_ENCODED_LENGTH characters
    """
    fibonacci = generate_fibonacci_sequence(len(segments) + 3)

    combined = segments[0] if segments else ''
    for i in range(1, len(segments)):
        segment = segments[i]
        if not segment:
            continue

        separator = SACRED_SEPARATORS[(fibonacci[i] * depth) % len(SACRED_SEPARATORS)]

        if i % 3 == 0:
            combined += separator + reverse_string(segment)
        elif i % 3 == 1:
            combined += separator + interleave_strings(combined[-1:], segment)
        else:
            combined += separator + segment

    return combined[:MAX_ENCODED_LENGTH]


def encode_with_fractal_recursion(seed, recursion_depth, max_depth=MAX_RECURSION_DEPTH):
    """
    Encode a seed through recursion_depth rounds of fractal mixing.

    Each round splits the current value into Fibonacci-sized segments
    (8-23 characters), runs the π, golden ratio and hash spiral mixers in
    rotation and recombines the result.

    Args:
        seed: Seed string
        recursion_depth: Number of rounds; <= 0 returns the seed unchanged
        max_depth: Upper bound on recursion_depth (default: MAX_RECURSION_DEPTH)

    Returns:
        str: Encoded value, at most MAX_ENCODED_LENGTH characters

    Raises:
        RecursionDepthError: If recursion_depth exceeds max_depth
    """
    if recursion_depth <= 0 or not seed:
        return seed

    if recursion_depth > max_depth:
        raise RecursionDepthError(
            f"Recursion depth {recursion_depth} exceeds maximum of {max_depth}"
        )

    fibonacci = generate_fibonacci_sequence(recursion_depth + 3)
    current = sha256_hex(seed)

    for depth in range(1, recursion_depth + 1):
        segment_length = fibonacci[depth] % 16 + 8
        segments = split_segments(current, segment_length)

        transformed = [
            MIXERS[index % len(MIXERS)](segment, depth)
            for index, segment in enumerate(segments)
        ]

        current = combine_with_sacred_pattern(transformed, depth)
        logger.debug(
            f"Encoder round {depth}/{recursion_depth}: "
            f"{len(segments)} segments of {segment_length}, output length {len(current)}"
        )

    return current
