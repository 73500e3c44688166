"""
Spiral Walk
Square-spiral traversal used by the hash spiral mixer and the branch engine.

Two forms are provided:
    apply_spiral       - one-way gather used by the encoder; raw targets may repeat
    spiral_permute     - invertible scatter used by the cipher; a repeated target
                         advances to the next free position
"""

import numpy as np
from .char_transforms import xor_char, mask_char, unmask_char


def spiral_coordinates(steps):
    """
    Walk a square spiral from the origin, heading "up" (dy = -1).

    Args:
        steps: Number of steps to take

    Returns:
        list: (x, y) position after each step
    """
    x, y = 0, 0
    dx, dy = 0, -1
    coordinates = []

    for _ in range(steps):
        # Turn at the spiral corners
        if x == y or (x < 0 and x == -y) or (x > 0 and x == 1 - y):
            dx, dy = -dy, dx

        x += dx
        y += dy
        coordinates.append((x, y))

    return coordinates


def spiral_targets(length):
    """Raw target index (x + y) mod length for each spiral step."""
    if length <= 0:
        return []
    return [(x + y) % length for x, y in spiral_coordinates(length)]


def pattern_index(step, pattern_length, clockwise):
    """Index into the pattern for a step; counter-clockwise reads it mirrored."""
    if clockwise:
        return step % pattern_length
    return pattern_length - 1 - (step % pattern_length)


def apply_spiral(text, pattern, clockwise):
    """
    Gather characters along the spiral and XOR them with the pattern.

    Output position i reads the raw spiral target of step i. Targets can
    repeat, so this is not invertible.

    Args:
        text: Input string
        pattern: Pattern string (non-empty when text is non-empty)
        clockwise: Pattern read direction

    Returns:
        str: Transformed string of the same length
    """
    if not text:
        return text

    result = []
    for step, target in enumerate(spiral_targets(len(text))):
        pattern_char = pattern[pattern_index(step, len(pattern), clockwise)]
        result.append(xor_char(text[target], ord(pattern_char)))

    return ''.join(result)


def _next_free(next_slot, slot):
    """Follow next_slot links to the first free slot, compressing the path."""
    root = slot
    while next_slot[root] != root:
        root = next_slot[root]
    while next_slot[slot] != root:
        next_slot[slot], slot = root, next_slot[slot]
    return root


def spiral_permutation(length):
    """
    Turn the raw spiral targets into a permutation of range(length).

    A target already taken is advanced (mod length) to the next free slot.
    Taken slots link to their successor, so each lookup is near constant time.

    Args:
        length: Number of positions

    Returns:
        np.ndarray: order[i] is the destination of input position i
    """
    next_slot = list(range(length))
    order = np.empty(length, dtype=np.int64)

    for step, target in enumerate(spiral_targets(length)):
        slot = _next_free(next_slot, target)
        next_slot[slot] = (slot + 1) % length
        order[step] = slot

    return order


def spiral_permute(text, pattern, clockwise):
    """
    Scatter characters along the spiral permutation, masking each with the pattern.

    Args:
        text: Input string
        pattern: Pattern string (non-empty when text is non-empty)
        clockwise: Pattern read direction

    Returns:
        str: Permuted string of the same length
    """
    if not text:
        return text

    order = spiral_permutation(len(text))
    result = [''] * len(text)

    for step, char in enumerate(text):
        pattern_char = pattern[pattern_index(step, len(pattern), clockwise)]
        result[order[step]] = mask_char(char, ord(pattern_char))

    return ''.join(result)


def spiral_unpermute(text, pattern, clockwise):
    """Inverse of spiral_permute for the same pattern and direction."""
    if not text:
        return text

    order = spiral_permutation(len(text))
    result = []

    for step in range(len(text)):
        pattern_char = pattern[pattern_index(step, len(pattern), clockwise)]
        result.append(unmask_char(text[order[step]], ord(pattern_char)))

    return ''.join(result)
