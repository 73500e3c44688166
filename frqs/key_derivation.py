"""
Key Material Derivation
Derived keys from seeds and the 12-octave key distribution from keys
"""

import logging
from .char_transforms import shift_char
from .constants import (
    KEY_RECURSION_DEPTH,
    OCTAVE_COUNT,
    OCTAVE_LENGTH,
    PI_DIGITS,
    SEPARATOR_BASE
)
from .errors import InvalidKeyError, InvalidSeedError
from .fractal_encoder import encode_with_fractal_recursion
from .sacred_math import golden_ratio_sequence, sha256_hex

logger = logging.getLogger(__name__)


def generate_fractal_recursive_key(seed, length):
    """
    Derive a key of the requested length from a seed.

    The seed is encoded at depth 5, then sampled at positions picked by
    the φ^(i+1) fractional table; each sampled character is shifted by a
    later table entry mod 26.

    Args:
        seed: Non-empty seed string
        length: Key length (>= 0)

    Returns:
        str: Derived key of exactly `length` characters

    Raises:
        InvalidSeedError: If seed is empty
        ValueError: If length is negative
    """
    if length < 0:
        raise ValueError(f"Key length must be non-negative, got {length}")
    if not seed:
        raise InvalidSeedError("Cannot derive a key from an empty seed")

    encoded = encode_with_fractal_recursion(seed, KEY_RECURSION_DEPTH)
    phi_pattern = golden_ratio_sequence(length)

    key = []
    for i in range(length):
        source_index = int((phi_pattern[i] / 256) * len(encoded))
        shift = phi_pattern[(i + 3) % length] % 26
        key.append(shift_char(encoded[source_index], shift))

    logger.debug(f"Derived {length}-character key from {len(encoded)}-character encoding")
    return ''.join(key)


def generate_key_distribution(key):
    """
    Build the 12-octave key distribution for a key.

    Octave o mixes a rotation of the key picked by the key hash with a
    prefix picked by π digits, hashed and truncated to 16 hex characters.

    Args:
        key: Non-empty key string

    Returns:
        list: 12 sub-keys of 16 characters, order significant

    Raises:
        InvalidKeyError: If key is empty
    """
    if not key:
        raise InvalidKeyError("Cannot build a key distribution from an empty key")

    key_hash = sha256_hex(key)
    octaves = []

    for octave in range(OCTAVE_COUNT):
        key_index = int(key_hash[octave * 2:octave * 2 + 2], 16) % 64
        pi_index = int(PI_DIGITS[octave * 3:octave * 3 + 3]) % 64

        segment = key[key_index % len(key):] + key[:pi_index % len(key)]
        octaves.append(sha256_hex(segment)[:OCTAVE_LENGTH])

    return octaves


def separator_for(octave):
    """Separator character carried by branches keyed with this octave."""
    return chr((ord(octave[0]) % 16) + SEPARATOR_BASE)


def branch_separators(distribution):
    """Separator for each octave of a distribution, in order."""
    return [separator_for(octave) for octave in distribution]
