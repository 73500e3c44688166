"""
FRQS Constants
Fixed tables and limits used throughout the Fractal Recursive Quantum Security pipeline
"""

# Golden Ratio (φ) - drives branching, key sampling and the golden ratio mixer
PHI = 1.618033988749895

# First 100 digits of π after the decimal point
PI_DIGITS = (
    "1415926535897932384626433832795028841971693993751058209749445923"
    "078164062862089986280348253421170679"
)

# Width of the π window read by the π-segmented mixer
PI_WINDOW_SIZE = 10

# Multiplier selecting the π window start for a given depth
PI_WINDOW_STRIDE = 7

# Separators placed between encoder segments
SACRED_SEPARATORS = ['~', '.', '-', '+', '=', '*', '&', '#', '@']

# Encoder output is truncated to this many characters
MAX_ENCODED_LENGTH = 128

# Hard cap on encoder rounds
MAX_RECURSION_DEPTH = 64

# Encoder depth used when deriving keys
KEY_RECURSION_DEPTH = 5

# Key distribution shape (12 octaves of 16 hex characters)
OCTAVE_COUNT = 12
OCTAVE_LENGTH = 16

# Branch separators are chr((ord(octave[0]) % 16) + SEPARATOR_BASE)
SEPARATOR_BASE = 36

# Printable ASCII range all folded transforms land in
PRINTABLE_MIN = 32
PRINTABLE_MAX = 126
PRINTABLE_SPAN = PRINTABLE_MAX - PRINTABLE_MIN + 1

# Size of the golden ratio table used by the golden ratio mixer
GOLDEN_SEQUENCE_LENGTH = 10

# T-Hex alphabet for base-20 frame headers (20 characters)
T_HEX_ALPHABET = "0123456789ABCDEFGHIJ"

# Base for T-Hex encoding
T_HEX_BASE = 20

# Default tolerance for fuzzy comparisons, in percent
DEFAULT_TOLERANCE_PERCENT = 5

FRQS_VERSION = "2.0"
