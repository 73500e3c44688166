"""
FRQS Package
Fractal Recursive Quantum Security: a deterministic string transformation pipeline
for key stretching, reversible keyed obfuscation and fuzzy comparison.

"Quantum" is branding only. Nothing here is vetted cryptography.
"""

from .constants import (
    PHI,
    PI_DIGITS,
    SACRED_SEPARATORS,
    MAX_ENCODED_LENGTH,
    MAX_RECURSION_DEPTH,
    KEY_RECURSION_DEPTH,
    OCTAVE_COUNT,
    OCTAVE_LENGTH,
    T_HEX_ALPHABET,
    T_HEX_BASE,
    DEFAULT_TOLERANCE_PERCENT,
    FRQS_VERSION
)

from .errors import (
    FRQSError,
    InvalidKeyError,
    InvalidSeedError,
    RecursionDepthError,
    FramingError
)

from .char_transforms import shift_char, xor_char, rotate_char, mask_char, unmask_char

from .fractal_encoder import encode_with_fractal_recursion, combine_with_sacred_pattern

from .key_derivation import (
    generate_fractal_recursive_key,
    generate_key_distribution,
    separator_for
)

from .branch_engine import (
    FRQSCipher,
    branch_by_golden_ratio,
    encrypt_with_frqs,
    decrypt_with_frqs
)

from .comparator import (
    calculate_levenshtein_distance,
    calculate_string_similarity,
    quantum_resistant_compare
)

# Short names for the library surface
encode = encode_with_fractal_recursion
derive_key = generate_fractal_recursive_key
derive_distribution = generate_key_distribution
encrypt = encrypt_with_frqs
decrypt = decrypt_with_frqs
fuzzy_match = quantum_resistant_compare

__all__ = [
    # Constants
    'PHI',
    'PI_DIGITS',
    'SACRED_SEPARATORS',
    'MAX_ENCODED_LENGTH',
    'MAX_RECURSION_DEPTH',
    'KEY_RECURSION_DEPTH',
    'OCTAVE_COUNT',
    'OCTAVE_LENGTH',
    'T_HEX_ALPHABET',
    'T_HEX_BASE',
    'DEFAULT_TOLERANCE_PERCENT',
    'FRQS_VERSION',

    # Errors
    'FRQSError',
    'InvalidKeyError',
    'InvalidSeedError',
    'RecursionDepthError',
    'FramingError',

    # Char transforms
    'shift_char',
    'xor_char',
    'rotate_char',
    'mask_char',
    'unmask_char',

    # Encoder and key material
    'encode_with_fractal_recursion',
    'combine_with_sacred_pattern',
    'generate_fractal_recursive_key',
    'generate_key_distribution',
    'separator_for',

    # Branch engine
    'FRQSCipher',
    'branch_by_golden_ratio',
    'encrypt_with_frqs',
    'decrypt_with_frqs',

    # Comparator
    'calculate_levenshtein_distance',
    'calculate_string_similarity',
    'quantum_resistant_compare',

    # Short names
    'encode',
    'derive_key',
    'derive_distribution',
    'encrypt',
    'decrypt',
    'fuzzy_match'
]
