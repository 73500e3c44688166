"""
Character Transform Primitives
Pure single-character operations. Every function is total and returns one character.
"""

from .constants import PRINTABLE_MIN, PRINTABLE_MAX, PRINTABLE_SPAN


def _fold_printable(code):
    return chr((code - PRINTABLE_MIN) % PRINTABLE_SPAN + PRINTABLE_MIN)


def shift_char(char, amount):
    """
    Shift a character within its own alphabet.

    ASCII letters wrap within their case, digits within 0-9, anything else
    within printable ASCII.

    Args:
        char: Single character
        amount: Shift amount (may be negative)

    Returns:
        str: Shifted printable character
    """
    code = ord(char)

    if 'a' <= char <= 'z' or 'A' <= char <= 'Z':
        base = ord('A') if char <= 'Z' else ord('a')
        return chr((code - base + amount) % 26 + base)

    if '0' <= char <= '9':
        return chr((code - ord('0') + amount) % 10 + ord('0'))

    return _fold_printable(code + amount)


def xor_char(char, value):
    """
    XOR the character code with value and fold into printable ASCII.

    The fold is lossy, so this is a one-way mixing step.
    """
    return chr((ord(char) ^ value) % PRINTABLE_SPAN + PRINTABLE_MIN)


def rotate_char(char, rotation, depth):
    """
    Rotate a character by a depth-dependent rule.

    depth % 3 == 0 adds the rotation, == 1 subtracts it, otherwise the
    sign alternates with the parity of depth.
    """
    code = ord(char)

    if depth % 3 == 0:
        new_code = code + rotation
    elif depth % 3 == 1:
        new_code = code - rotation
    else:
        new_code = code + rotation * (1 if depth % 2 == 0 else -1)

    return _fold_printable(new_code)


def mask_char(char, value):
    """
    Keyed rotation within the printable ring.

    Characters outside printable ASCII pass through untouched, which keeps
    the mapping a bijection over every code point.
    """
    code = ord(char)
    if PRINTABLE_MIN <= code <= PRINTABLE_MAX:
        return _fold_printable(code + value)
    return char


def unmask_char(char, value):
    """Inverse of mask_char for the same value."""
    code = ord(char)
    if PRINTABLE_MIN <= code <= PRINTABLE_MAX:
        return _fold_printable(code - value)
    return char
