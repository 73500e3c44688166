"""
FRQS error taxonomy.
Primitive transforms never raise; only key handling and ciphertext parsing do.
"""


class FRQSError(Exception):
    """Base FRQS error"""
    pass


class InvalidKeyError(FRQSError, ValueError):
    """Key material cannot be derived from an empty key"""
    pass


class InvalidSeedError(FRQSError, ValueError):
    """A derived key was requested from an empty seed"""
    pass


class RecursionDepthError(FRQSError, ValueError):
    """Encoder depth exceeds the configured cap"""
    pass


class FramingError(FRQSError, ValueError):
    """Ciphertext frames are malformed, truncated or do not match the key"""
    pass
