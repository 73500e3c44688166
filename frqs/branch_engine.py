"""
FRQS Branch Transform Engine
Splits plaintext at golden-ratio offsets, masks and spirals each branch with a
rotating octave of the key distribution, and frames the result
"""

import logging
from .char_transforms import mask_char, unmask_char
from .comparator import calculate_string_similarity
from .constants import PHI
from .errors import FramingError
from .framing import frame_branches, unframe_branches
from .key_derivation import branch_separators, generate_key_distribution
from .spiral import spiral_permute, spiral_unpermute

logger = logging.getLogger(__name__)


def golden_ratio_branch_points(length):
    """
    Cut points for golden ratio branching.

    Starting at 0, each point advances by max(1, floor(φ * p) mod length).

    Args:
        length: Length of the data being branched

    Returns:
        list: Strictly increasing start offsets, first one 0
    """
    points = []
    position = 0

    while position < length:
        points.append(position)
        position += max(1, int(PHI * position) % length)

    return points


def branch_lengths(length):
    """Length of each golden ratio branch of a string of the given length."""
    points = golden_ratio_branch_points(length)
    ends = points[1:] + [length]
    return [end - start for start, end in zip(points, ends)]


def branch_by_golden_ratio(data):
    """
    Split data into branches at golden ratio cut points.

    Returns:
        list: Non-empty branches whose concatenation is data
    """
    points = golden_ratio_branch_points(len(data))
    ends = points[1:] + [len(data)]
    return [data[start:end] for start, end in zip(points, ends)]


def _mask_branch(branch, octave):
    return ''.join(
        mask_char(char, ord(octave[j % len(octave)]))
        for j, char in enumerate(branch)
    )


def _unmask_branch(branch, octave):
    return ''.join(
        unmask_char(char, ord(octave[j % len(octave)]))
        for j, char in enumerate(branch)
    )


class FRQSCipher:
    """
    Keyed, reversible obfuscation of strings.

    This is a deterministic keyed permutation, not encryption: it offers no
    confidentiality or integrity guarantee beyond frame consistency checks.
    """

    def encrypt(self, data, key):
        """
        Obfuscate data with key.

        Args:
            data: Plaintext string
            key: Key string

        Returns:
            str: Framed ciphertext, or data unchanged if data or key is empty
        """
        if not data or not key:
            return data

        distribution = generate_key_distribution(key)
        separators = branch_separators(distribution)
        branches = branch_by_golden_ratio(data)

        transformed = []
        for i, branch in enumerate(branches):
            octave = distribution[i % len(distribution)]
            masked = _mask_branch(branch, octave)
            transformed.append(spiral_permute(masked, octave, i % 2 == 0))

        logger.debug(f"Encrypted {len(data)} characters in {len(branches)} branches")
        return frame_branches(transformed, separators)

    def decrypt(self, data, key):
        """
        Recover plaintext from ciphertext produced by encrypt() with the same key.

        Args:
            data: Framed ciphertext
            key: Key string

        Returns:
            str: Plaintext, or data unchanged if data or key is empty

        Raises:
            FramingError: If the ciphertext does not unframe cleanly for this key
        """
        if not data or not key:
            return data

        distribution = generate_key_distribution(key)
        separators = branch_separators(distribution)
        framed = unframe_branches(data, separators)

        branches = []
        for i, branch in enumerate(framed):
            octave = distribution[i % len(distribution)]
            unspiraled = spiral_unpermute(branch, octave, i % 2 == 0)
            branches.append(_unmask_branch(unspiraled, octave))

        total_length = sum(len(branch) for branch in branches)
        if [len(branch) for branch in branches] != branch_lengths(total_length):
            raise FramingError(
                f"Branch layout does not match golden ratio branching for {total_length} characters"
            )

        logger.debug(f"Decrypted {total_length} characters from {len(branches)} branches")
        return ''.join(branches)

    def validate_round_trip(self, plaintext, key):
        """
        Check that decrypt(encrypt(plaintext)) reproduces plaintext.

        Args:
            plaintext: Plaintext to test
            key: Key to test with

        Returns:
            dict: Validation results
        """
        ciphertext = self.encrypt(plaintext, key)
        try:
            recovered = self.decrypt(ciphertext, key)
        except FramingError as e:
            logger.warning(f"Round trip failed to unframe: {e}")
            recovered = ''

        return {
            'is_valid': recovered == plaintext,
            'plaintext_length': len(plaintext),
            'ciphertext_length': len(ciphertext),
            'branch_count': len(branch_by_golden_ratio(plaintext)),
            'similarity': calculate_string_similarity(plaintext, recovered)
        }

    def get_expansion_ratio(self, plaintext, ciphertext):
        """
        Ciphertext length over plaintext length (frame headers add overhead).

        Returns:
            float: Expansion ratio, 0.0 for empty plaintext
        """
        return len(ciphertext) / len(plaintext) if plaintext else 0.0


_default_cipher = FRQSCipher()


def encrypt_with_frqs(data, key):
    """Obfuscate data with key using the FRQS branch engine."""
    return _default_cipher.encrypt(data, key)


def decrypt_with_frqs(data, key):
    """Reverse encrypt_with_frqs for the same key."""
    return _default_cipher.decrypt(data, key)
